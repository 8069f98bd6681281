#!/usr/bin/env python3
"""
HTTP wrapper for program derived address search
JSON in, JSON out: POST / with {"programId": str, "seeds": [...]}
"""

import logging

from flask import Flask, Response, jsonify, request

from pda.bridge import get_program_derived_address
from pda.config import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

app = Flask(__name__)

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


def text_response(body, status=200):
    """Plain-text response"""
    return Response(body, status=status, mimetype='text/plain')


def seed_from_json(seed):
    """
    Convert one JSON seed for the bridge

    Strings pass through unchanged; arrays of integers 0-255 become
    bytes. Anything else is left for the bridge to reject.
    """
    if isinstance(seed, list):
        for value in seed:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError('byte values must be integers 0-255')
        return bytes(seed)
    return seed


@app.route('/', methods=ALL_METHODS)
@app.route('/<path:path>', methods=ALL_METHODS)
def derive(path=''):
    """Derive a program address from the posted program id and seeds"""
    if request.method != 'POST':
        return text_response('Send a POST request')

    try:
        body = request.get_json(force=True)
        if not isinstance(body, dict):
            return text_response('Missing programId or seeds', 400)

        program_id = body.get('programId')
        seeds = body.get('seeds')
        if not program_id or seeds is None:
            return text_response('Missing programId or seeds', 400)

        if not isinstance(seeds, list):
            return jsonify({'error': 'seeds must be an array'}), 400

        processed_seeds = []
        for i, seed in enumerate(seeds):
            try:
                processed_seeds.append(seed_from_json(seed))
            except ValueError as e:
                return jsonify({'error': f'seed {i}: {e}'}), 400

        result = get_program_derived_address(program_id, processed_seeds)
        if 'error' in result:
            logger.info(f"Derivation rejected: {result['error']}")
            return jsonify(result), 400

        logger.info(f"Derived {result['address']} (bump {result['bump']})")
        return jsonify(result)

    except Exception as e:
        logger.exception("Unexpected failure while deriving address")
        return text_response(f'Server Error: {e}', 500)


def run_server(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=False):
    """Serve the wrapper until interrupted"""
    logger.info(f"Starting PDA web server on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug, threaded=True)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    print("🌐 Starting PDA web server")
    print(f"📮 POST JSON to http://{DEFAULT_HOST}:{DEFAULT_PORT}/")
    run_server()
