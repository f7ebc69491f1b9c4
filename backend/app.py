import os
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from data_access import HighScoreRepository
from domain.levels import LEVEL_TABLE
from services.high_scores import HighScoreLedger

load_dotenv()

app = Flask(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

_ledger = None


def get_ledger() -> HighScoreLedger:
    """Ledger shared by all requests, created on first use."""
    global _ledger
    if _ledger is None:
        _ledger = HighScoreLedger(HighScoreRepository())
    return _ledger


def _parse_score(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        score = int(value)
    except (TypeError, ValueError):
        return None
    return score if score >= 0 else None


@app.route("/api/highscores", methods=["GET"])
def get_high_scores():
    """
    Get the ledger, best score first.
    """
    return jsonify({"highScores": get_ledger().to_list()})


@app.route("/api/highscores/check", methods=["GET"])
def check_high_score():
    """
    Check whether a score would enter the ledger.

    Query parameters:
    - score: non-negative integer
    """
    score = _parse_score(request.args.get("score"))
    if score is None:
        return jsonify({"error": "score must be a non-negative integer"}), 400
    return jsonify({"score": score, "isHighScore": get_ledger().is_high_score(score)})


@app.route("/api/highscores", methods=["POST"])
def submit_high_score():
    """
    Submit a finished run.

    Body: {"name": str, "score": int}
    Returns 201 with the rank when the score made the list, 200 otherwise.
    """
    payload = request.get_json(silent=True) or {}
    score = _parse_score(payload.get("score"))
    if score is None:
        return jsonify({"error": "score must be a non-negative integer"}), 400
    name = payload.get("name") or ""
    if not isinstance(name, str):
        return jsonify({"error": "name must be a string"}), 400

    ledger = get_ledger()
    if not ledger.is_high_score(score):
        return jsonify({"accepted": False, "highScores": ledger.to_list()}), 200

    rank = ledger.add_score(name, score)
    return jsonify({"accepted": True, "rank": rank, "highScores": ledger.to_list()}), 201


@app.route("/api/levels", methods=["GET"])
def get_levels():
    """
    Get the level table: thresholds, speeds and colours.
    """
    levels = [
        {
            "level": idx,
            "scoreThreshold": entry.score_threshold,
            "tickIntervalMs": entry.tick_interval_ms,
            "snakeColor": entry.snake_color,
            "foodColor": entry.food_color,
        }
        for idx, entry in enumerate(LEVEL_TABLE, start=1)
    ]
    return jsonify({"levels": levels})


if __name__ == "__main__":
    # Run the Flask app in debug mode.
    app.run(debug=os.getenv("FLASK_DEBUG"))
