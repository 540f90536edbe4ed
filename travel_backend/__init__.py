"""
Travel recommender backend.

Serves travel-preference questions and turns the user's answers into a
structured destination recommendation generated by a Groq-hosted LLM.
"""

__version__ = "0.1.0"
