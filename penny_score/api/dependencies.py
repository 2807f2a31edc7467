"""Dependency injection for FastAPI endpoints"""

import random

from fastapi import Request


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_tip_rng() -> random.Random:
    """Random source for tip selection; tests override it with a seeded one"""
    return random.Random()
