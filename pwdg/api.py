import logging

from flask import Flask, jsonify, request

from .config import resolve_configuration
from .errors import GenerationError
from .generator import PasswordGenerator

logger = logging.getLogger(__name__)

MAX_COUNT = 100
MAX_LENGTH = 1024


def create_app() -> Flask:
    app = Flask(__name__)

    @app.route('/')
    def home():
        return jsonify({
            "message": "pwdg API is running"
        })

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _invalid("request body must be a JSON object")

        count = data.get('count', 1)
        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= MAX_COUNT:
            return _invalid(f"count must be an integer between 1 and {MAX_COUNT}")
        exclude = data.get('exclude', "")
        if exclude is not None and not isinstance(exclude, str):
            return _invalid("exclude must be a string")
        strong = data.get('strong', False)
        if not isinstance(strong, bool):
            return _invalid("strong must be a boolean")
        length = data.get('length')
        if isinstance(length, int) and not isinstance(length, bool) and length > MAX_LENGTH:
            return _invalid(f"length must be at most {MAX_LENGTH}")

        overrides = {
            'length': length,
            'min_upper': data.get('min_upper'),
            'min_lower': data.get('min_lower'),
            'min_digit': data.get('min_digit'),
            'min_special': data.get('min_special'),
            'exclude': exclude,
        }
        try:
            cfg = resolve_configuration({}, overrides, strong=strong)
            passwords = PasswordGenerator(cfg).generate_many(count)
        except GenerationError as e:
            logger.info("Rejected generation request: %s", e.code)
            return jsonify(e.to_dict()), 400
        except (TypeError, ValueError) as e:
            return _invalid(str(e))

        if count == 1:
            return jsonify({'password': passwords[0]})
        return jsonify({'passwords': passwords})

    return app


def _invalid(message: str):
    return jsonify({"error": "INVALID_REQUEST", "message": message}), 400


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
