"""Result panel rendering: labels, percentages and feature list for display."""

from pathlib import Path

from src.scoring.importance import round_half_up

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def build_result_panel(result: dict) -> dict:
    """Turn a ScoreResult dict into the values the results panel displays."""
    is_good = result["verdict"] == "Good"
    return {
        "quality_label": f"{result['verdict']} Wine",
        "quality_class": "good" if is_good else "poor",
        "confidence_pct": round_half_up(result["confidence"] * 100),
        "score_pct": f"{result['score'] * 100:.1f}",
        "features": [{"name": f["name"], "value": f["value"]} for f in result["features"]],
    }


def render_text(panel: dict) -> str:
    """Plain-text rendering of the panel for the CLI."""
    lines = [
        f"=== {panel['quality_label']} ===",
        f"Prediction Confidence: {panel['confidence_pct']}%",
        f"Model Score: {panel['score_pct']}%",
        "",
        "Top Contributing Features:",
    ]
    width = max((len(f["name"]) for f in panel["features"]), default=0)
    for f in panel["features"]:
        lines.append(f"  {f['name'].ljust(width)}  {f['value']}%")
    return "\n".join(lines)
