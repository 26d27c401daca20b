"""Version-bump pull request job configuration."""
