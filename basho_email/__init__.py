"""
Basho Email Generator - personalized outreach emails from a single form.

This package provides a small locally served web form that turns outreach
details into a prompt and asks OpenAI to write the email.
"""

__version__ = "0.1.0"
