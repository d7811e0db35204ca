"""Session plumbing shared by the loader, post-processor and validator."""
