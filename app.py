from dotenv import load_dotenv
load_dotenv()
from flask import Flask, request, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix
import logging
import os

# --- Cipher tools ---
from cipherkit import encoders
from cipherkit.caesar import as_charsets, brute_force
from cipherkit.errors import CipherKitError
from cipherkit.playfair import key_matrix, pretty_square
from cipherkit.vigenere import random_key
from helpers import get_payload, rate_limit

# ----- Configuration -----
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logging.getLogger("werkzeug").setLevel(logging.INFO)

app = Flask(__name__)

app.secret_key = os.environ.get("CIPHERKIT_SECRET") or "dev-secret-key"
app.config["MAX_CONTENT_LENGTH"] = int(os.environ.get("CIPHERKIT_MAX_CONTENT_MB", "10")) * 1024 * 1024
app.config["RATE_LIMIT"] = int(os.environ.get("CIPHERKIT_RATE_LIMIT", "60"))
app.config["RATE_WINDOW"] = int(os.environ.get("CIPHERKIT_RATE_WINDOW", "60"))
app.config["MAX_KEY_LENGTH"] = int(os.environ.get("CIPHERKIT_MAX_KEY_LENGTH", "256"))

# Proxy fix (reverse proxy safe)
app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)


def _limited(key):
    ok, ip = rate_limit(key, limit=app.config["RATE_LIMIT"], window_s=app.config["RATE_WINDOW"])
    if not ok:
        app.logger.warning("rate limit hit: %s on %s", ip, key)
        return jsonify({"error": "Rate limit exceeded. Try again shortly."}), 429
    return None


@app.after_request
def add_security_headers(resp):
    resp.headers["X-Content-Type-Options"] = "nosniff"
    resp.headers["X-Frame-Options"] = "DENY"
    resp.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    resp.headers["Content-Security-Policy"] = "default-src 'self'"
    return resp


# ==============================
#  ENCODER / DECODER API ROUTES
# ==============================
@app.route("/api/tools", methods=["GET"])
def api_tools():
    return jsonify({"tools": sorted(encoders.TOOLS)})


def _run(mode):
    blocked = _limited("api_cipher")
    if blocked:
        return blocked

    text, cipher, key, options = get_payload()
    try:
        result = encoders.perform(cipher, mode, text, key, options)
        return jsonify({"result": result})
    except CipherKitError as e:
        app.logger.warning("%s error (%s): %s", mode.value.capitalize(), cipher or "-", e)
        return jsonify({"error": str(e)}), 400


@app.route("/api/encode", methods=["POST"])
def api_encode():
    return _run(encoders.Direction.ENCODE)


@app.route("/api/decode", methods=["POST"])
def api_decode():
    return _run(encoders.Direction.DECODE)


# ==============================
#  Tool extras
# ==============================
@app.route("/api/caesar/brute-force", methods=["POST"])
def api_caesar_brute_force():
    blocked = _limited("api_cipher")
    if blocked:
        return blocked

    text, _cipher, _key, options = get_payload()
    if not text:
        return jsonify({"error": "Please enter some text to analyze."}), 400

    results = brute_force(text, as_charsets(options))
    return jsonify({"results": [{"shift": s, "text": t} for s, t in results]})


@app.route("/api/playfair/matrix", methods=["POST"])
def api_playfair_matrix():
    blocked = _limited("api_cipher")
    if blocked:
        return blocked

    _text, _cipher, key, _options = get_payload()
    matrix = key_matrix(key)
    return jsonify({"matrix": matrix, "pretty": pretty_square(matrix)})


@app.route("/api/vigenere/random-key", methods=["GET"])
def api_vigenere_random_key():
    blocked = _limited("api_cipher")
    if blocked:
        return blocked

    max_len = app.config["MAX_KEY_LENGTH"]
    try:
        length = int(request.args.get("length", 8))
    except ValueError:
        return jsonify({"error": "Key length must be an integer."}), 400
    if length > max_len:
        return jsonify({"error": f"Key length must be at most {max_len}."}), 400

    try:
        return jsonify({"key": random_key(length)})
    except CipherKitError as e:
        return jsonify({"error": str(e)}), 400


# ------------------- Run -------------------
if __name__ == "__main__":
    app.run(debug=os.environ.get("FLASK_DEBUG") == "1")
