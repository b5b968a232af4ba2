"""
アルケイン・チェッカー FastAPI サーバ
ブラウザの表示側からの操作を受け取り、ゲームの状態を返す
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel
from typing import List, Dict
import uuid

from ..engine import Game, GameSnapshot

app = FastAPI(
    title="Arcane Checkers API",
    description="チェッカー＋RPGゲームのバックエンドAPI",
    version="1.0.0"
)

# CORS設定（フロントエンドからのアクセスを許可）
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ゲームを保持する辞書（1セッション = 1つのローカル対局）
games: Dict[str, Game] = {}


# Pydanticモデル（リクエスト/レスポンス用）

class NewGameResponse(BaseModel):
    game_id: str
    message: str
    game_state: GameSnapshot


class SelectRequest(BaseModel):
    row: int
    col: int


class AbilityRequest(BaseModel):
    ability: str  # dash, smite


class ActionResponse(BaseModel):
    changed: bool  # Falseなら操作は無視された
    game_state: GameSnapshot


class ValidMovesResponse(BaseModel):
    row: int
    col: int
    moves: List[dict]
    count: int


def _get_game(game_id: str) -> Game:
    if game_id not in games:
        raise HTTPException(status_code=404, detail="Game not found")
    return games[game_id]


# エンドポイント

@app.get("/api")
async def root():
    """APIルート"""
    return {
        "message": "Welcome to the Arcane Checkers API",
        "version": "1.0.0",
        "endpoints": [
            "/new_game",
            "/get_game/{game_id}",
            "/select/{game_id}",
            "/activate_ability/{game_id}",
            "/cancel_ability/{game_id}",
            "/reset/{game_id}",
            "/get_valid_moves/{game_id}",
            "/delete_game/{game_id}",
        ]
    }


@app.post("/new_game", response_model=NewGameResponse)
async def new_game():
    """新しいゲームを開始する"""
    game_id = str(uuid.uuid4())
    game = Game()
    games[game_id] = game
    logger.info("New game {}", game_id)

    return NewGameResponse(
        game_id=game_id,
        message="Game Started! Red moves first.",
        game_state=game.snapshot()
    )


@app.get("/get_game/{game_id}", response_model=GameSnapshot)
async def get_game(game_id: str):
    """ゲームの状態を取得"""
    return _get_game(game_id).snapshot()


@app.post("/select/{game_id}", response_model=ActionResponse)
async def select(game_id: str, request: SelectRequest):
    """
    マスのクリック
    駒の選択・移動・能力の対象指定のいずれか（状態によって決まる）
    """
    game = _get_game(game_id)
    changed = game.select_or_act(request.row, request.col)
    return ActionResponse(changed=changed, game_state=game.snapshot())


@app.post("/activate_ability/{game_id}", response_model=ActionResponse)
async def activate_ability(game_id: str, request: AbilityRequest):
    """能力を選択する（同じ能力をもう一度送ると取り消し）"""
    game = _get_game(game_id)
    changed = game.activate_ability(request.ability)
    return ActionResponse(changed=changed, game_state=game.snapshot())


@app.post("/cancel_ability/{game_id}", response_model=ActionResponse)
async def cancel_ability(game_id: str):
    """能力の選択を取り消す"""
    game = _get_game(game_id)
    changed = game.cancel_ability()
    return ActionResponse(changed=changed, game_state=game.snapshot())


@app.post("/reset/{game_id}", response_model=ActionResponse)
async def reset(game_id: str):
    """ゲームを最初からやり直す"""
    game = _get_game(game_id)
    game.reset_game()
    return ActionResponse(changed=True, game_state=game.snapshot())


@app.get("/get_valid_moves/{game_id}", response_model=ValidMovesResponse)
async def get_valid_moves(game_id: str, row: int, col: int):
    """指定マスの駒の合法手を取得（盤面は変更しない）"""
    game = _get_game(game_id)
    moves = game.valid_moves_for(row, col)
    return ValidMovesResponse(
        row=row,
        col=col,
        moves=[move.to_dict() for move in moves],
        count=len(moves)
    )


@app.delete("/delete_game/{game_id}")
async def delete_game(game_id: str):
    """ゲームを削除"""
    _get_game(game_id)
    del games[game_id]
    return {"message": "Game deleted"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
