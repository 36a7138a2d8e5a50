"""Infrastructure layer — file access for reservation exports."""
