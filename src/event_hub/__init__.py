"""
event_hub - Event management service with public summaries

Packages:
- schema: pydantic models (Event, PublicEvent, requests, responses)
- repository: in-memory EventRepository and the query pipeline
- events: EventService, lifecycle table, public projection
- summary: content-addressed cache, generators, chunked streaming
- services: lifecycle notifications
- utils: time helpers, exceptions, logging, background tasks
"""

__version__ = "1.0.0"
