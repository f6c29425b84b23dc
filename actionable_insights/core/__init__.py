"""
Core functionality for the Actionable Insights application.

This package contains the YouTube service, audio transcription, and the
prompt flows that summarize, extract actionable items, plan, and highlight
transcriptions.
"""
