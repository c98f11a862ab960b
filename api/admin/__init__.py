"""Admin views over the file-server hit counter."""
