#!/usr/bin/env python
"""
アルケイン・チェッカー 開発サーバ起動スクリプト
"""

import sys
import os

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from src.api.main import app
import uvicorn

HOST = os.environ.get("GAME_HOST", "0.0.0.0")
PORT = int(os.environ.get("GAME_PORT", "8001"))

if __name__ == "__main__":
    print("=" * 60)
    print("Arcane Checkers 開発サーバを起動します")
    print("=" * 60)
    print(f"APIサーバ: http://localhost:{PORT}")
    print(f"API ドキュメント: http://localhost:{PORT}/docs")
    print("=" * 60)
    print()

    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        reload=False,
        log_level="info"
    )
