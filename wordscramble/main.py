from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .dictionary import DictionaryOracle, DictionaryService, DictionaryUnavailableError, check_word
from .managers.game import Game, GameManager, SessionNotStartedError
from .messages import alert_for
from .routers.ws import router as ws_router
from .schemas import Rejected, SessionState, SubmitRequest, SubmitResult, WordCheck
from .wordlist import load_root_words

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, oracle: Optional[DictionaryOracle] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if oracle is None:
        if settings.dictionary_path:
            oracle = DictionaryService.from_file(settings.dictionary_path, language=settings.language)
        else:
            oracle = DictionaryService(language=settings.language)

    app = FastAPI(title="Word Scramble", version="0.1.0")
    app.state.settings = settings
    app.state.oracle = oracle
    app.state.games = GameManager(
        load_root_words(settings.wordlist_path),
        oracle,
        language=settings.language,
        oracle_timeout=settings.oracle_timeout_sec or None,
    )

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.include_router(ws_router, prefix='/ws')

    def _get_game(request: Request, game_id: str) -> Game:
        game = request.app.state.games.get(game_id)
        if not game:
            raise HTTPException(status_code=404, detail='Session not found')
        return game

    # REST Endpoints
    @app.post('/sessions', status_code=201)
    async def create_session(request: Request) -> SessionState:
        game = request.app.state.games.create()
        game.start_session()
        return game.to_state()

    @app.get('/sessions/{game_id}')
    async def get_session(request: Request, game_id: str) -> SessionState:
        return _get_game(request, game_id).to_state()

    @app.post('/sessions/{game_id}/new-word')
    async def new_word(request: Request, game_id: str) -> SessionState:
        game = _get_game(request, game_id)
        game.start_session()
        return game.to_state()

    @app.post('/sessions/{game_id}/words')
    async def submit_word(request: Request, game_id: str, body: SubmitRequest) -> SubmitResult:
        game = _get_game(request, game_id)
        try:
            outcome = await game.submit(body.word)
        except SessionNotStartedError as e:
            raise HTTPException(status_code=409, detail=str(e))
        except DictionaryUnavailableError as e:
            raise HTTPException(status_code=503, detail=str(e))
        alert = None
        if isinstance(outcome, Rejected):
            alert = alert_for(outcome.reason, game.session.root_word)
        return SubmitResult(outcome=outcome, alert=alert, session=game.to_state())

    @app.delete('/sessions/{game_id}', status_code=204)
    async def delete_session(request: Request, game_id: str) -> None:
        if not request.app.state.games.remove(game_id):
            raise HTTPException(status_code=404, detail='Session not found')

    # Dictionary validation REST endpoint
    @app.get('/dict/validate')
    async def validate_word(request: Request, word: str) -> WordCheck:
        s = request.app.state.settings
        try:
            valid = await check_word(request.app.state.oracle, word.strip().lower(), s.language, s.oracle_timeout_sec or None)
        except DictionaryUnavailableError as e:
            raise HTTPException(status_code=503, detail=str(e))
        return WordCheck(word=word.strip().lower(), language=s.language, valid=valid)

    return app

app = create_app()

# Export ASGI app for uvicorn
application = app

# For local running: uvicorn wordscramble.main:application --reload --host 0.0.0.0 --port 8000
