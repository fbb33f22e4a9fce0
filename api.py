"""
Flask REST API for the BonCalc Web Keypad
Drives a calculator session over JSON endpoints
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from calculator import CalculatorEngine
import keypad
import config

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# One calculator session, shared with every client of this portal
engine = CalculatorEngine()


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #4B3F8C; color: white;">
        <h1>{config.APP_NAME} API Server</h1>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/display" style="color: #FF9500;">/api/display</a> - Current display text</li>
            <li><a href="/api/keys" style="color: #FF9500;">/api/keys</a> - Keypad layout</li>
            <li>POST /api/press - Press a key, body: {{"key": "7"}}</li>
            <li>POST /api/reset - Clear the calculator (AC)</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/display')
def get_display():
    """Get the current display text"""
    return jsonify({
        'success': True,
        'data': {'display': engine.display_string()}
    })


@app.route('/api/keys')
def get_keys():
    """Get the keypad layout, row by row"""
    return jsonify({
        'success': True,
        'data': {'layout': keypad.KEYPAD_LAYOUT}
    })


@app.route('/api/press', methods=['POST'])
def press_key():
    """Press one key and return the new display text"""
    payload = request.get_json(silent=True)
    key = payload.get('key') if isinstance(payload, dict) else None
    if key is None:
        return jsonify({'success': False, 'error': "Missing 'key'"}), 400

    try:
        display = keypad.press(engine, key)
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500

    return jsonify({
        'success': True,
        'data': {'display': display}
    })


@app.route('/api/reset', methods=['POST'])
def reset():
    """Clear the calculator (AC)"""
    engine.reset()
    return jsonify({
        'success': True,
        'data': {'display': engine.display_string()}
    })


if __name__ == '__main__':
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Keypad API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}/api")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}/api")
    print("="*60 + "\n")

    # Single-threaded: the engine is never touched by two requests at once
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)
