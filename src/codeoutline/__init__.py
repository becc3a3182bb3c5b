"""codeoutline - structural outlines of JavaScript and TypeScript source files."""

__version__ = "0.1.0"
