#!/usr/bin/env python3
"""
GitHub PR Files
Writes the files changed and deleted by pull requests to text files.
"""

from pr_files.cli import main


if __name__ == "__main__":
    main()
