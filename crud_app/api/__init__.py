"""Flask blueprints hosting the user directory screens."""
