"""
CLI - Command-line interface for the beautification manager.

The `beautify` command loads providers from entry points, registers them
and runs each file through the ordered fallback dispatch.

Example:
    # Format in place with two providers
    $ beautify -p acme.prettier:PrettierProvider -p acme.trim:TrimProvider src/app.js
    beautified src/app.js

    # CI check
    $ beautify --check -p acme.prettier:PrettierProvider src/*.js
    would beautify src/app.js
"""

from .main import main

__all__ = ["main"]
