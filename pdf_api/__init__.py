"""PDF Processing API service package."""
