"""Twirp TypeScript client generator for protoc."""

__version__ = "1.0.0"
