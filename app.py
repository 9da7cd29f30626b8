from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    BoardState,
    Player,
    RuleConfig,
    compute_hint,
    configure_logging,
    create_initial_state,
    legal_moves,
    parse_flag,
    resolve_after_sow,
    rules_from_env,
    score_moves,
    sow_stepwise,
    status_message,
    stones_from_env,
    with_hint_move,
)

DEFAULT_RULES = rules_from_env()
DEFAULT_STONES = stones_from_env()

app = Flask(__name__)


class ApiError(Exception):
    pass


# ---------- JSON conversion ----------

def state_to_json(s: BoardState) -> Dict[str, Any]:
    return {
        "pits": [int(x) for x in s.pits],
        "currentPlayer": s.current_player.value,
        "extraTurn": bool(s.extra_turn),
        "isGameOver": bool(s.is_game_over),
        "message": status_message(s),
    }


def json_to_state(obj: Any) -> BoardState:
    if not isinstance(obj, dict):
        raise ApiError("bad state: object required")
    try:
        pits = tuple(obj["pits"])
        player = Player(str(obj.get("currentPlayer", "A")))
        extra = bool(obj.get("extraTurn", False))
        return BoardState(pits=pits, current_player=player, extra_turn=extra)
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"bad state: {e}")


def _frame(pits: Tuple[int, ...], index: int) -> Dict[str, Any]:
    return {"pits": list(pits), "index": index}


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _rules(body: Dict[str, Any]) -> RuleConfig:
    relay = body.get("relay")
    if relay is None:
        return DEFAULT_RULES
    if isinstance(relay, str):
        try:
            relay = parse_flag(relay)
        except ValueError as e:
            raise ApiError(str(e))
    if not isinstance(relay, bool):
        raise ApiError("relay must be a boolean")
    return RuleConfig(relay_sowing=relay)


def _move(body: Dict[str, Any]) -> int:
    mv = body.get("move")
    if isinstance(mv, bool) or not isinstance(mv, int):
        raise ApiError("move must be a pit index")
    return mv


def _sow_frames(state: BoardState, pit: int, rules: RuleConfig) -> Tuple[List[Dict[str, Any]], Tuple[int, ...], int]:
    frames: List[Dict[str, Any]] = []
    pits, last = sow_stepwise(state, pit, lambda p, i: frames.append(_frame(p, i)), rules)
    return frames, pits, last


@app.errorhandler(ApiError)
def _bad_request(e: ApiError) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.get("/api/config")
def api_config() -> Any:
    return jsonify({"ok": True, "stonesPerPit": DEFAULT_STONES, "relaySowing": DEFAULT_RULES.relay_sowing})


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    stones = body.get("stones", DEFAULT_STONES)
    try:
        state = create_initial_state(stones)
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "state": state_to_json(state), "legalMoves": legal_moves(state)})


@app.post("/api/legal")
def api_legal() -> Any:
    state = json_to_state(_body().get("state"))
    return jsonify({"ok": True, "legalMoves": legal_moves(state)})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    move = _move(body)
    legal = legal_moves(state)
    if move not in legal:
        return jsonify({"ok": False, "error": "Illegal move", "legalMoves": legal}), 400
    frames, pits, last = _sow_frames(state, move, _rules(body))
    next_state = resolve_after_sow(state, pits, last)
    return jsonify({
        "ok": True,
        "state": state_to_json(next_state),
        "legalMoves": legal_moves(next_state),
        "frames": frames,
        "lastIndex": last,
    })


@app.post("/api/sow")
def api_sow() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    move = _move(body)
    legal = legal_moves(state)
    if move not in legal:
        return jsonify({"ok": False, "error": "Illegal move", "legalMoves": legal}), 400
    frames, pits, last = _sow_frames(state, move, _rules(body))
    return jsonify({"ok": True, "frames": frames, "pits": list(pits), "lastIndex": last})


@app.post("/api/resolve")
def api_resolve() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    pits = body.get("pits")
    last = body.get("lastIndex")
    if not isinstance(pits, list) or isinstance(last, bool) or not isinstance(last, int):
        raise ApiError("pits (list) and lastIndex (int) required")
    try:
        next_state = resolve_after_sow(state, pits, last)
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "state": state_to_json(next_state), "legalMoves": legal_moves(next_state)})


@app.post("/api/hint")
def api_hint() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    rules = _rules(body)
    scores = score_moves(state, rules)
    return jsonify({
        "ok": True,
        "hint": compute_hint(state, rules),
        "scores": {str(k): v for k, v in scores.items()},
    })


@app.post("/api/hint/apply")
def api_hint_apply() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    rules = _rules(body)
    hint: Optional[int] = compute_hint(state, rules)
    next_state = with_hint_move(state, rules)
    return jsonify({
        "ok": True,
        "hint": hint,
        "state": state_to_json(next_state),
        "legalMoves": legal_moves(next_state),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("KALAH_DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    configure_logging(debug)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
