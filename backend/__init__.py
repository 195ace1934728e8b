"""
@file_name: __init__.py
@author: NetMind.AI
@date: 2025-11-28
@description: FastAPI backend for Event Hub

This package provides:
- Admin REST APIs for creating, updating and listing events
- Public listing and streamed (SSE) event summaries
"""
