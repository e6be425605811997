# app.py
import argparse
import copy
import json
import sys

from flask import Flask, request, jsonify

from seo_toolkit import TOOLS, call_tool, list_tools, render

DEFAULT_CONFIG = {
    "MetaTagAnalyzer": {
        "title_min_length": 30, "title_max_length": 60,
        "desc_min_length": 70, "desc_max_length": 160,
    },
    "HeadingStructureAnalyzer": {"max_heading_length": 70, "preview_length": 40},
    "KeywordDensity": {"top_words": 15, "top_ngrams": 10},
    "RobotsTxtAnalyzer": {},
    "SitemapAnalyzer": {},
    "Global": {
        "request_timeout": 15,
        "user_agent": "seo-toolkit/1.0 (SEO analysis tool)",
        "debug": False,
    },
}

TEXT_TOOLS = {"keyword_density", "readability"}


def merge_config(base, overrides):
    """Section-wise shallow merge of a user config into a copy of `base`."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path):
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, 'r') as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found. Using default settings.", file=sys.stderr)
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError:
        print(f"Warning: Error decoding JSON from {path}. Using default settings.", file=sys.stderr)
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(custom_config, dict):
        print(f"Warning: Config file {path} does not hold a JSON object. Using default settings.", file=sys.stderr)
        return copy.deepcopy(DEFAULT_CONFIG)
    print(f"Loaded custom configuration from {path}", file=sys.stderr)
    return merge_config(DEFAULT_CONFIG, custom_config)


def create_app(config=None):
    app = Flask(__name__)
    app.config["SEO_TOOLKIT"] = config if config else copy.deepcopy(DEFAULT_CONFIG)

    @app.route('/tools', methods=['GET'])
    def tools_endpoint():
        return jsonify({"tools": list_tools()})

    @app.route('/tools/<name>', methods=['POST', 'GET'])
    def tool_endpoint(name):
        if name not in TOOLS:
            return jsonify({"error": f"Unknown tool: {name}"}), 404
        if request.method == 'GET':
            arguments = request.args.to_dict()
        else:
            arguments = request.get_json(silent=True)
            if not isinstance(arguments, dict):
                return jsonify({"error": "Invalid JSON payload"}), 400
        return jsonify(call_tool(name, arguments, app.config["SEO_TOOLKIT"]))

    return app


def build_arguments(tool_name, target, keyword=None):
    if target == "-":
        target = sys.stdin.read()
    if tool_name in TEXT_TOOLS:
        arguments = {"text": target}
        if tool_name == "keyword_density" and keyword:
            arguments["target_keyword"] = keyword
        return arguments
    return {"url": target}


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="SEO toolkit: page and text analysis")
    parser.add_argument("tool", nargs='?', default=None, choices=list(TOOLS),
                        help="Tool to run (omit to run in API/server mode).")
    parser.add_argument("target", nargs='?', default=None,
                        help="URL for page tools, text for text tools ('-' reads stdin).")
    parser.add_argument("--keyword", type=str, default=None, help="Target keyword or phrase for keyword_density.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="API server host.")
    parser.add_argument("--port", type=int, default=5000, help="API server port.")
    args = parser.parse_args(argv)

    config = load_config(args.config)

    if not args.tool:
        print(f"Starting Flask server on http://{args.host}:{args.port}/ (API mode)", file=sys.stderr)
        create_app(config).run(host=args.host, port=args.port, debug=False)
        return 0
    if args.target is None:
        parser.error(f"{args.tool} needs a target")

    result = call_tool(args.tool, build_arguments(args.tool, args.target, args.keyword), config)
    print(render(result))
    return 1 if "error" in result else 0


if __name__ == "__main__":
    sys.exit(run_cli())
