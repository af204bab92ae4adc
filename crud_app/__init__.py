"""User directory CRUD application package.

To use the Flask app:
    from crud_app.flask_app import create_app

To use the users API client:
    from crud_app.core.api import ApiClient, UserService

To drive a screen without a UI:
    from crud_app.core.list_controller import ListController
    from crud_app.core.form_controller import FormController
"""
# Note: flask_app is not imported here so the CLI can use crud_app.core
# without pulling in Flask
