"""Error handlers for the application."""
from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException


def register_error_handlers(app):
    """Register error handlers with the Flask app."""

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 Not Found errors."""
        if _wants_json():
            return jsonify({"error": "Not Found", "message": "Resource not found"}), 404
        return render_template("errors/404.html", title="Not Found"), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 Method Not Allowed errors."""
        if _wants_json():
            return jsonify({"error": "Method Not Allowed", "message": str(error.description)}), 405
        return render_template("errors/404.html", title="Method Not Allowed"), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server Error."""
        app.logger.error("Internal error: %s", error, exc_info=True)
        return _internal_error_response()

    @app.errorhandler(Exception)
    def handle_exception(error):
        """Handle uncaught exceptions."""
        # Pass through HTTP errors
        if isinstance(error, HTTPException):
            return error

        app.logger.error("Unhandled exception: %s", error, exc_info=True)
        return _internal_error_response()

    def _internal_error_response():
        if _wants_json():
            return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500
        return render_template("errors/500.html", title="Internal Server Error"), 500


def _wants_json():
    """Check if the client wants a JSON response."""
    return request.accept_mimetypes.accept_json and \
           not request.accept_mimetypes.accept_html
