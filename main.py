"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It initializes the game service and starts the Flask application.
"""

from wordle_engine import create_app
from wordle_engine.config import Config
from wordle_engine.services.game_service import initialize_game_service
from wordle_engine.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(
            max_attempts=Config.MAX_ATTEMPTS,
            seed=Config.WORD_SEED,
            game_ttl_seconds=Config.GAME_TTL_SECONDS,
            finished_game_ttl_seconds=Config.FINISHED_GAME_TTL_SECONDS,
        )
        print(f"✓ Game service initialized ({game_service.max_attempts} attempts per game)")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
