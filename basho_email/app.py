"""
Flask application for the Basho email generator.

Serves the outreach form, keeps the form record and the latest generated
email in memory, and exposes a small JSON API used by the page script.
"""

import logging
from datetime import datetime
from typing import Optional

from flask import Flask, jsonify, redirect, render_template, request, url_for

from . import __version__
from .config import config
from .form_state import OutreachFormState, UnknownFieldError
from .generate_email import EmailGenerationClient, EmailGenerationError
from .prompt_components import (
    ERROR_PLACEHOLDER,
    FIELD_LABELS,
    FIELD_NAMES,
    MULTILINE_FIELDS,
)

logger = logging.getLogger(__name__)


class OutreachController:
    """
    Owns the form record and the generated email display slot.
    
    A new submission overwrites the slot when it completes, so with
    overlapping submissions the last one to finish wins.
    """
    
    def __init__(
        self,
        form: Optional[OutreachFormState] = None,
        client: Optional[EmailGenerationClient] = None,
    ):
        self.form = form or OutreachFormState()
        self.client = client or EmailGenerationClient()
        self.generated_email: str = ""
    
    def apply(self, values: dict) -> None:
        """Update every known form field present in values."""
        for name in FIELD_NAMES:
            if name in values:
                self.form.update(name, values[name])
    
    def submit(self) -> str:
        """Generate an email from the current record and store the result."""
        try:
            result = self.client.generate(self.form.snapshot())
        except EmailGenerationError as e:
            logger.error(f"Error details: {e!r}")
            result = ERROR_PLACEHOLDER
        
        self.generated_email = result
        return result
    
    def reset(self) -> None:
        """Restore example values and clear the generated email."""
        self.form.reset()
        self.generated_email = ""


def create_app(
    controller: Optional[OutreachController] = None,
    client: Optional[EmailGenerationClient] = None,
) -> Flask:
    """Create the Flask app around a single outreach controller."""
    app = Flask(__name__)
    app.config["DEBUG"] = config.FLASK_DEBUG
    
    outreach = controller or OutreachController(client=client)
    app.extensions["outreach_controller"] = outreach
    
    # ========================================
    # Page
    # ========================================
    
    def render_form_page():
        return render_template(
            "index.html",
            fields=outreach.form.snapshot(),
            field_names=FIELD_NAMES,
            labels=FIELD_LABELS,
            multiline=MULTILINE_FIELDS,
            generated_email=outreach.generated_email,
        )
    
    @app.route("/", methods=["GET"])
    def index():
        """Show the outreach form."""
        return render_form_page()
    
    @app.route("/", methods=["POST"])
    def submit_form():
        """Apply the submitted fields and generate an email."""
        outreach.apply(request.form.to_dict())
        outreach.submit()
        return render_form_page()
    
    @app.route("/reset", methods=["POST"])
    def reset_form():
        """Restore the example values."""
        outreach.reset()
        return redirect(url_for("index"))
    
    # ========================================
    # JSON API
    # ========================================
    
    @app.route("/api/health", methods=["GET"])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "version": __version__,
        })
    
    @app.route("/api/form", methods=["GET"])
    def get_form():
        """Get the current form record and generated email."""
        return jsonify({
            "fields": outreach.form.snapshot(),
            "generated_email": outreach.generated_email,
        })
    
    @app.route("/api/form/<field_name>", methods=["PUT"])
    def update_field(field_name):
        """Update a single form field."""
        data = request.get_json(silent=True) or {}
        value = data.get("value")
        
        if not isinstance(value, str):
            return jsonify({"error": "A string 'value' is required"}), 400
        
        try:
            outreach.form.update(field_name, value)
        except UnknownFieldError:
            return jsonify({"error": f"Unknown field: {field_name}"}), 404
        
        return jsonify({"fields": outreach.form.snapshot()})
    
    @app.route("/api/generate", methods=["POST"])
    def generate():
        """Generate an email, optionally overriding fields first."""
        data = request.get_json(silent=True) or {}
        fields = data.get("fields", {})
        
        if not isinstance(fields, dict):
            return jsonify({"error": "'fields' must be an object"}), 400
        
        unknown = [name for name in fields if name not in FIELD_LABELS]
        if unknown:
            return jsonify({"error": f"Unknown fields: {', '.join(unknown)}"}), 400
        
        if not all(isinstance(v, str) for v in fields.values()):
            return jsonify({"error": "Field values must be strings"}), 400
        
        outreach.apply(fields)
        return jsonify({"generated_email": outreach.submit()})
    
    return app
