"""Send a prompt file to a chat-completion API and print the reply."""

__version__ = "0.1.0"
