"""
Source package for the interview preparation backend.

This package contains the application logic including:
- Data classes for users, documents and interview chats
- Services for documents, retrieval, interviews, auth and storage
- API routes, middleware and response schemas
"""
