#!/usr/bin/env -S python3 -u

from flask import Flask, jsonify
from flask import request as flask_request

from antithesis import lifecycle

from detector import EvaluationResult


class Plugin():
    '''
    @purpose - narrow host adapter: holds one registered check and serves it over http
    @param name - plugin name reported to the monitoring host
    '''

    def __init__(self, name:str):
        self.name = name
        self.feature = None

    def register(self, feature):
        '''
        @purpose - register the check the host will trigger
        @param feature - callable (info, option) -> EvaluationResult
        '''
        print(f"Workload [plugin.py]: registering {getattr(feature, '__name__', feature)} on {self.name}")
        self.feature = feature

    def execute(self, info:dict=None, option:dict=None) -> EvaluationResult:
        if self.feature is None:
            raise RuntimeError(f"no feature registered on plugin {self.name}")
        return self.feature(info or {}, option or {})

    def create_app(self) -> Flask:
        app = Flask(__name__)

        @app.route("/health", methods=["GET"])
        def health():
            return jsonify({"plugin": self.name, "status": "ok"}), 200

        @app.route("/execute", methods=["POST"])
        def execute():
            body = flask_request.get_json(silent=True)
            if body is None:
                body = {}
            if not isinstance(body, dict):
                return jsonify({"error": "request body must be a json object"}), 400
            info = body.get("info") or {}
            option = body.get("option") or {}
            if not isinstance(info, dict) or not isinstance(option, dict):
                return jsonify({"error": "info and option must be json objects"}), 400
            result = self.execute(info, option)
            return jsonify(result.to_dict()), 200

        return app

    def start(self, addr:str, port:int):
        if self.feature is None:
            raise RuntimeError(f"no feature registered on plugin {self.name}")
        app = self.create_app()
        print(f"Workload [plugin.py]: {self.name} listening on {addr}:{port}")
        lifecycle.setup_complete({"plugin":self.name,"addr":addr,"port":port})
        app.run(host=addr, port=port)
