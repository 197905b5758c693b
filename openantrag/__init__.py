"""OpenAntrag Display: render OpenAntrag parliamentary proposals as HTML."""

__version__ = "0.1.0"
