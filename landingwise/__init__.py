"""
LandingWise: landing pages from natural-language prompts.

Generates Tailwind landing pages with an LLM, validates them with structural
heuristics, retries with corrective prompts, and publishes them with a
waitlist form.
"""

__version__ = "0.1.0"
