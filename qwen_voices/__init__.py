"""Predefined voice catalog for the Qwen3 TTS Flash models."""
