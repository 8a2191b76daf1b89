#!/usr/bin/env python3
"""Entry point for running the bot."""

from app.main import run

if __name__ == "__main__":
    run()
