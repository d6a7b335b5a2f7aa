from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from wordscramble.dictionary import DictionaryUnavailableError
from wordscramble.messages import alert_for
from wordscramble.schemas import Rejected, SubmitRequest

router = APIRouter()

@router.websocket("/play")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()

    games = websocket.app.state.games
    game = games.create()
    game.start_session()

    try:
        # Send initial state to player
        await websocket.send_json({
            "type": "init",
            "session": game.to_state().model_dump(),
        })

        while True:
            # one message at a time, so submissions never overlap
            try:
                data = await websocket.receive_json()
            except ValueError:
                await websocket.send_json({"type": "error", "error": "Message is not valid JSON"})
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            if kind == "new-word":
                game.start_session()
                await websocket.send_json({
                    "type": "init",
                    "session": game.to_state().model_dump(),
                })
            elif kind == "submit":
                try:
                    request = SubmitRequest.model_validate(data)
                except ValidationError:
                    await websocket.send_json({"type": "error", "error": "Submit needs a string 'word'"})
                    continue
                try:
                    outcome = await game.submit(request.word)
                except DictionaryUnavailableError as e:
                    await websocket.send_json({"type": "error", "error": str(e)})
                    continue
                alert = None
                if isinstance(outcome, Rejected):
                    alert = alert_for(outcome.reason, game.session.root_word).model_dump()
                await websocket.send_json({
                    "type": "result",
                    "outcome": outcome.model_dump() if outcome else None,
                    "alert": alert,
                    "session": game.to_state().model_dump(),
                })
            else:
                await websocket.send_json({"type": "error", "error": f"Unknown message type: {kind}"})
    except WebSocketDisconnect:
        pass
    finally:
        games.remove(game.id)
