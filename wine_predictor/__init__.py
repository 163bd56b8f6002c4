"""Wine Quality Predictor - form handling, result panel and audit around the scoring engine."""

from wine_predictor.predictor import run_prediction
from wine_predictor.presenter import build_result_panel, render_text
from wine_predictor.form import field_validity

__all__ = ["run_prediction", "build_result_panel", "render_text", "field_validity"]
