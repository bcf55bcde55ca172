from event_tracker.services.event_service import EventService

__all__ = ["EventService"]
