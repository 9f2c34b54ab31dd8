"""
NoteShelf Backend: API Routes Package
=====================================

Route Inventory:
    - notes.py:       /notes, /notes/{id}, /notes/{id}/category, /notes/{id}/remove-category
    - categories.py:  /categories, /categories/{id}, /categories/{id}/notes
    - health.py:      /health, /test
    - dependencies.py: per-request manager construction

Routes stay thin: extract the request data, call one manager operation,
return the record. Status codes for failures come from the exception
handlers in main.py.
"""
