"""In-memory fakes for the clipboard and picker ports."""
