"""
Event system for the tennisgame engine.

This package provides the emitter and the process-wide bus that games,
engines and adapters use to publish and observe scoring events.
"""

from tennisgame.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
