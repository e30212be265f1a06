"""
RISC-V Explain - Flask Backend

Provides REST API endpoints that explain single lines of RISC-V assembly and
list the supported instructions.
"""

import os

from flask import Flask, request, jsonify

from .explainer import explain_instruction, is_error
from .instructions import INSTRUCTIONS


app = Flask(__name__)
app.config['DEBUG'] = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'


def error_response(error: str, message: str, status: int = 400) -> tuple:
    """Create a standardized error response."""
    return jsonify({'error': error, 'message': message}), status


def explanation_payload(line: str) -> dict:
    """Explain one line and package the result for JSON."""
    explanation = explain_instruction(line)
    return {'line': line, 'explanation': explanation, 'error': is_error(explanation)}


@app.after_request
def add_cors_headers(response):
    """Add CORS headers to all responses for local development."""
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Methods'] = 'GET, POST, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    return response


@app.errorhandler(400)
def bad_request(error):
    return error_response('Bad request', str(error.description), 400)


@app.errorhandler(404)
def not_found(error):
    return error_response('Not found', str(error.description), 404)


@app.errorhandler(500)
def internal_error(error):
    return error_response('Internal server error', str(error.description), 500)


@app.route('/api/explain', methods=['POST', 'OPTIONS'])
def explain_post():
    """Explain a line ({"line": ...}) or a batch of lines ({"lines": [...]})."""
    if request.method == 'OPTIONS':
        return '', 204

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return error_response('Invalid request', 'Request body must be a JSON object')

    if 'lines' in body:
        lines = body['lines']
        if not isinstance(lines, list) or not all(isinstance(item, str) for item in lines):
            return error_response('Invalid request', "'lines' must be a list of strings")
        return jsonify({'results': [explanation_payload(line) for line in lines]})

    line = body.get('line')
    if not isinstance(line, str):
        return error_response('Invalid request', "Request must include a 'line' string")

    return jsonify(explanation_payload(line))


@app.route('/api/explain', methods=['GET'])
def explain_get():
    """Explain the line given in the 'line' query parameter."""
    line = request.args.get('line')
    if line is None:
        return error_response('Missing parameter', "Query must include 'line'")

    return jsonify(explanation_payload(line))


@app.route('/api/instructions', methods=['GET'])
def list_instructions():
    """List supported instructions with their format tags."""
    return jsonify({
        'instructions': [
            {'mnemonic': mnemonic, 'format': spec.format.value, 'summary': spec.summary}
            for mnemonic, spec in INSTRUCTIONS.items()
        ]
    })


if __name__ == '__main__':
    # Get port from environment or default to 5050 (5000 is often used by macOS AirPlay)
    port = int(os.environ.get('PORT', 5050))
    debug = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

    print(f"Starting RISC-V Explain API on port {port}")
    print(f"Debug mode: {debug}")

    app.run(host='0.0.0.0', port=port, debug=debug)
