#!/usr/bin/env python3
"""Flask web app for the Wine Quality Predictor."""

import jsonschema
from flask import Flask, render_template, request, jsonify

from src.features import DEMO_DATA, WINE_TYPES
from src.validation import InvalidInputError
from wine_predictor.audit import audit_log, setup_app_logging, use_log_dir
from wine_predictor.config import Settings
from wine_predictor.form import extract_fields, field_validity, form_context
from wine_predictor.predictor import run_prediction
from wine_predictor.presenter import TEMPLATES_DIR

settings = Settings.from_env()
use_log_dir(settings.log_dir)

log = setup_app_logging()

app = Flask(__name__, template_folder=str(TEMPLATES_DIR))

NOT_AN_OBJECT = {"input": "expected a JSON object"}
app.config["PREDICT_DELAY_SECONDS"] = settings.predict_delay_seconds
app.config["NOISE_SEED"] = settings.noise_seed


def _predict(raw: dict, source: str) -> dict:
    return run_prediction(
        raw,
        delay_seconds=app.config["PREDICT_DELAY_SECONDS"],
        seed=app.config["NOISE_SEED"],
        source=source,
    )


def _json_body() -> dict | None:
    """Request JSON as a dict; {} when absent or unparseable, None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _input_error_fields(e: Exception) -> dict:
    if isinstance(e, InvalidInputError):
        return e.fields
    path = "/".join(str(p) for p in e.path) or "input"
    return {path: e.message}


@app.route("/")
def index():
    values = dict(DEMO_DATA) if request.args.get("demo") else {}
    return render_template(
        "index.html",
        fields=form_context(values),
        wine_types=WINE_TYPES,
        panel=None,
        error=None,
    )


@app.route("/predict", methods=["POST"])
def predict_form():
    """Form submit: score the wine and render the result panel below the form."""
    raw = extract_fields(request.form)
    validity = field_validity(raw)
    try:
        out = _predict(raw, source="form")
    except (InvalidInputError, jsonschema.ValidationError) as e:
        fields = _input_error_fields(e)
        audit_log(action="predict", status="rejected", error=str(e), extra={"fields": fields, "source": "form"})
        log.warning("Form prediction rejected: %s", fields)
        return render_template(
            "index.html",
            fields=form_context(raw, validity),
            wine_types=WINE_TYPES,
            panel=None,
            error=fields,
        ), 400
    except Exception as e:
        audit_log(action="predict", status="error", error=str(e), extra={"source": "form"})
        log.exception("Form prediction failed")
        return render_template(
            "index.html",
            fields=form_context(raw, validity),
            wine_types=WINE_TYPES,
            panel=None,
            error={"server": str(e)},
        ), 500

    audit_log(
        action="predict",
        status="success",
        run_id=out["run_id"],
        verdict=out["result"]["verdict"],
        score=out["result"]["score"],
        extra={"source": "form", "input_hash": out["input_hash"]},
    )
    return render_template(
        "index.html",
        fields=form_context(raw, out["validity"]),
        wine_types=WINE_TYPES,
        panel=out["panel"],
        error=None,
    )


@app.route("/api/predict", methods=["POST"])
def api_predict():
    """Score a wine from a JSON body keyed by feature name."""
    data = _json_body()
    if data is None:
        audit_log(
            action="predict",
            status="rejected",
            error="JSON body is not an object",
            extra={"fields": NOT_AN_OBJECT, "source": "api"},
        )
        log.warning("API prediction rejected: body is not a JSON object")
        return jsonify({"error": "Invalid wine input", "fields": NOT_AN_OBJECT}), 400
    raw = extract_fields(data)
    log.info("API prediction started (fields=%d)", len(raw))
    try:
        out = _predict(raw, source="api")
    except (InvalidInputError, jsonschema.ValidationError) as e:
        fields = _input_error_fields(e)
        audit_log(action="predict", status="rejected", error=str(e), extra={"fields": fields, "source": "api"})
        log.warning("API prediction rejected: %s", fields)
        return jsonify({"error": "Invalid wine input", "fields": fields}), 400
    except Exception as e:
        audit_log(action="predict", status="error", error=str(e), extra={"source": "api"})
        log.exception("API prediction failed")
        return jsonify({"error": str(e)}), 500

    audit_log(
        action="predict",
        status="success",
        run_id=out["run_id"],
        verdict=out["result"]["verdict"],
        score=out["result"]["score"],
        extra={"source": "api", "input_hash": out["input_hash"]},
    )
    return jsonify({
        "run_id": out["run_id"],
        "scoring_version": out["scoring_version"],
        "prediction": out["result"],
        "panel": out["panel"],
        "validity": out["validity"],
    })


@app.route("/api/validate", methods=["POST"])
def api_validate():
    """Real-time field validity (valid/invalid) against the form's declared bounds."""
    data = _json_body()
    if data is None:
        audit_log(
            action="validate",
            status="rejected",
            error="JSON body is not an object",
            extra={"fields": NOT_AN_OBJECT, "source": "api"},
        )
        return jsonify({"error": "Invalid wine input", "fields": NOT_AN_OBJECT}), 400
    return jsonify({"validity": field_validity(extract_fields(data))})


@app.route("/api/demo", methods=["GET"])
def api_demo():
    """Demo sample used by the 'Fill Demo Data' button."""
    return jsonify(DEMO_DATA)


if __name__ == "__main__":
    log.info(
        "Wine Quality Predictor starting on http://127.0.0.1:%d | delay=%.1fs | noise_seed=%s | Logs: logs/app.log | Audit: logs/audit.log",
        settings.port,
        settings.predict_delay_seconds,
        settings.noise_seed,
    )
    app.run(debug=True, port=settings.port)
