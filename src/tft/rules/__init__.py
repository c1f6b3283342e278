"""CrRLJ 3.3 rule files and loader."""
