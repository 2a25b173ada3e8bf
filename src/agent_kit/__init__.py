"""agent-kit — install AI agent definitions, skills, prompts, and instructions.

Content ships with the package under content/ and is mirrored into a
project's .github/ directory. Existing files are never overwritten.
"""

__version__ = "0.1.0"
