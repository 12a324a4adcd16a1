# src/smart_hub/__main__.py
import asyncio
import signal
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI
from hypercorn.asyncio import serve
from hypercorn.config import Config as HyperConfig

from smart_hub.api.routes import AppState, create_app
from smart_hub.core.config_manager import ConfigManager, seed_hub
from smart_hub.core.hub import Hub
from smart_hub.core.scheduler import ScheduleRunner
from smart_hub.utils.exceptions import ConfigurationError, InitializationError
from smart_hub.utils.logging import setup_logging, get_logger


class APIServer:
    """Handles API server initialization and management"""

    def __init__(self, config: Dict[str, Any], shutdown_event: asyncio.Event, app_state: AppState):
        self.config = config
        self.shutdown_event = shutdown_event
        self.logger = get_logger("API Server")
        self.app: Optional[FastAPI] = None
        self.app_state = app_state

    async def initialize(self) -> FastAPI:
        """Initialize FastAPI application with routes"""
        try:
            self.app = create_app(self.app_state)
            return self.app
        except Exception:
            raise InitializationError(f"Failed to initialize API server: {traceback.format_exc()}")

    async def start(self):
        """Start the API server"""
        if not self.app:
            await self.initialize()

        hypercorn_config = HyperConfig()
        try:
            host = self.config['api']['host']
            port = self.config['api']['port']
            hypercorn_config.bind = [f"{host}:{port}"]

            async def shutdown_trigger():
                await self.shutdown_event.wait()

            self.logger.info(f"Starting API server on {host}:{port}")
            await serve(self.app, hypercorn_config, shutdown_trigger=shutdown_trigger)
        except Exception:
            self.logger.error(f"Failed to start API server: {traceback.format_exc()}")
            raise


class SmartHubApp:
    """Main smart hub application class"""

    def __init__(self, config_path: str):
        self.logger = get_logger("Main App")
        try:
            self.config = ConfigManager.load_config(config_path)
            setup_logging(self.config.get('logging', {}))
        except ConfigurationError:
            self.logger.error(f"Configuration error: {traceback.format_exc()}")
            sys.exit(1)

        self.shutdown_event = asyncio.Event()
        self.app_state = AppState(Hub())
        self.api_server = APIServer(self.config, self.shutdown_event, self.app_state)

    async def initialize_components(self):
        """Initialize all application components"""
        try:
            await seed_hub(self.app_state.hub, self.config['hub'] or {})

            scheduler_config = self.config['scheduler'] or {}
            if scheduler_config.get('enabled', True):
                self.app_state.schedule_runner = ScheduleRunner(
                    self.app_state.hub,
                    tick_interval=scheduler_config.get('tick_interval', 1)
                )

            for report in await self.app_state.hub.status():
                self.logger.info(report)
            self.logger.info("All components initialized successfully")
        except Exception:
            raise InitializationError(f"Failed to initialize components: {traceback.format_exc()}")

    async def shutdown(self):
        """Gracefully shutdown all components"""
        self.logger.info("Initiating shutdown sequence")
        try:
            if self.app_state.schedule_runner:
                await self.app_state.schedule_runner.stop()
            self.shutdown_event.set()
            self.logger.info("Shutdown completed successfully")
        except Exception:
            self.logger.error(f"Error during shutdown: {traceback.format_exc()}")

    def handle_signals(self):
        """Set up signal handlers for graceful shutdown"""
        def signal_handler(signum, frame):
            self.logger.info(f"Received signal {signum}")
            asyncio.create_task(self.shutdown())

        for sig in (signal.SIGTERM, signal.SIGINT):
            signal.signal(sig, signal_handler)

    async def run(self):
        """Main application entry point"""
        try:
            self.handle_signals()
            await self.initialize_components()

            services = [self.api_server.start()]
            if self.app_state.schedule_runner:
                services.append(self.app_state.schedule_runner.start())
            await asyncio.gather(*services)
        except InitializationError:
            self.logger.error(f"Initialization error: {traceback.format_exc()}")
            await self.shutdown()
            sys.exit(1)
        except Exception:
            self.logger.error(f"Unexpected error: {traceback.format_exc()}")
            await self.shutdown()
            sys.exit(1)


def main():
    """Application entry point"""
    config_path = Path("src/config/default.yml")
    if ConfigManager.create_default_config(config_path):
        print(f"Created default config at {config_path}")

    app = SmartHubApp(str(config_path))
    asyncio.run(app.run())

if __name__ == "__main__":
    main()
