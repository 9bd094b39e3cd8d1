"""Azure OpenAI chat proxy."""

__version__ = "0.1.0"
