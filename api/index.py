"""Vercel serverless entry point for the brickify API."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from brickify.web.app import create_app

app = create_app(default_options={"includeJs": True})
