"""Core Business Logic Module

This module holds the client-side data-and-form lifecycle, independent of
any UI framework.

Architecture:
    - Pure Python (no Flask dependencies in core logic)
    - Collaborators (notifier, navigator, confirmation) are injected
    - Reusable across interfaces (web UI, CLI, tests)

Module Structure:
    - api/               : Users REST API client (normalized errors)
    - models.py          : User, Draft, FieldErrors
    - validators.py      : Draft validation and server error attribution
    - feedback.py        : Collaborator interfaces and route paths
    - list_controller.py : Users list state (fetch, refresh, search, delete)
    - form_controller.py : Add/edit form state (validate, submit)

Usage Pattern:
    Import explicitly when needed:
        from crud_app.core.validators import validate
        from crud_app.core.list_controller import ListController
        from crud_app.core.form_controller import FormController
"""
