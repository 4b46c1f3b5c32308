"""monkey — tokenizer and interactive shell for the monkey scripting language."""

__version__ = "0.1.0"
