"""Infrastructure layer — file persistence for the resolution list."""
