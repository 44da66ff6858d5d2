import json
from typing import Optional

import typer

from .brand.detector import detect as detect_mention
from .config import Settings
from .exceptions import ConfigError, ValidationError

app = typer.Typer(help="Vérifie si une marque est citée dans une réponse Gemini.")


def _load_settings() -> Settings:
    cfg = Settings.from_env()
    try:
        cfg.require_api_key()
    except ConfigError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)
    return cfg


@app.command()
def detect(text: str, brand: str):
    """Détection seule sur un texte fourni (pas d'appel API)."""
    result = detect_mention(text, brand)
    typer.echo(json.dumps(result.model_dump(), ensure_ascii=False))


@app.command()
def check(prompt: str, brand: str):
    """Pose PROMPT à Gemini et cherche BRAND dans la réponse."""
    from backend.services.check_service import build_check_service

    service = build_check_service(_load_settings())
    try:
        result = service.check(prompt, brand)
    except ValidationError as e:
        typer.echo(f"⚠️  {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(json.dumps(result.model_dump(by_alias=True), ensure_ascii=False, indent=2))


@app.command()
def serve(host: Optional[str] = typer.Option(None), port: Optional[int] = typer.Option(None)):
    """Lance l'API (uvicorn)."""
    import uvicorn

    cfg = _load_settings()
    uvicorn.run("backend.app:app", host=host or cfg.HOST, port=port or cfg.PORT)


if __name__ == "__main__":
    app()
