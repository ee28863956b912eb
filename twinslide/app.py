"""
Application orchestration.

Startup order:
1. Read the persisted store (before the command line is parsed)
2. Parse the command line (malformed input exits with status 1)
3. Load YAML config, initialize settings, set up logging
4. Load the frontend and resolve options (or list actions and exit)
5. Initialize the named locks, then launch directly (run-now) or show the
   chooser, and hand control to the frontend event loop
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence

import yaml

from twinslide.cli import arguments_parse
from twinslide.common.app_logging import logging_configure
from twinslide.common.config import AppConfig, ConfigLoader
from twinslide.common.errors import FrontendLoadError, OptionValueError
from twinslide.common.locks import locks_init
from twinslide.common.runtime_models import CommandLineOptions, InteractiveOverrides
from twinslide.common.settings import settings
from twinslide.common.types import ActionCatalog, EffectiveOptions
from twinslide.options.resolver import (
    launchResolution_run,
    options_resolve,
    persistedSubset_extract,
)
from twinslide.options.sidecar import durationHint_read
from twinslide.options.store import LoadStatus, PersistedStore, StoreLoadResult
from twinslide.session.collaborators import Chooser, Frontend
from twinslide.session.frontend_factory import frontend_load
from twinslide.session.lifecycle import LaunchSession

logger = logging.getLogger(__name__)

__all__ = [
    "Application",
    "actionCatalog_print",
    "application_run",
    "storeResult_report",
]


class Application:
    """Connects chooser, option resolution and the launch session"""

    def __init__(
        self,
        frontend: Frontend,
        store: PersistedStore,
        store_result: StoreLoadResult,
        cli: CommandLineOptions,
        bindings: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize application

        Args:
            frontend: Collaborator factory and event loop
            store: Persisted store written on chooser confirm
            store_result: Store contents read at startup
            cli: Parsed command line
            bindings: Key bindings from config
        """
        self._frontend: Frontend = frontend
        self._store: PersistedStore = store
        self._store_result: StoreLoadResult = store_result
        self._cli: CommandLineOptions = cli
        self._document_path: str | None = cli.document_path
        self._options: EffectiveOptions | None = None
        self._chooser: Chooser | None = None
        self._session: LaunchSession = LaunchSession(
            frontend=frontend,
            run_now=cli.run_now,
            on_idle=self.chooser_show,
            bindings=bindings,
        )

    @property
    def session(self) -> LaunchSession:
        """Get launch session"""
        return self._session

    @property
    def options(self) -> EffectiveOptions | None:
        """Get the most recently resolved options"""
        return self._options

    def run(self, options: EffectiveOptions) -> int:
        """
        Launch or show the chooser, then run the event loop

        Args:
            options: Options resolved at startup

        Returns:
            Process exit status
        """
        self._options = options
        if options.run_now:
            if self._document_path is None:
                print("Error: No document given", file=sys.stderr)
                return 1
            self._session.session_launch(options, self._document_path)
        else:
            self._chooser = self._frontend.chooser_create(
                on_confirm=self.presentation_start,
                on_exit=self.application_exit,
            )
            self.chooser_show()

        self._frontend.mainLoop_run()
        return 0

    def chooser_show(self) -> None:
        """Show the chooser with the current options"""
        if self._chooser is None or self._options is None:
            return
        self._chooser.show(self._options, self._document_path)

    def presentation_start(self, overrides: InteractiveOverrides) -> None:
        """
        Launch from the chooser

        Values the resolver rejects are logged and the chooser is shown
        again.

        Args:
            overrides: Values confirmed in the chooser
        """
        document_path = overrides.document_path or self._document_path
        if document_path is None:
            logger.error("No document given")
            return

        try:
            options = options_resolve(
                self._store_result,
                self._cli,
                sidecar_hint=durationHint_read(document_path),
                overrides=overrides,
            )
        except OptionValueError as e:
            logger.error(f"Rejected chooser values: {e}")
            self.chooser_show()
            return
        self._options = options
        self._document_path = document_path

        if self._chooser is not None:
            self._chooser.hide()
        self._store.subset_save(persistedSubset_extract(options))
        self._session.session_launch(options, document_path)

    def application_exit(self) -> None:
        """Leave the event loop"""
        self._frontend.mainLoop_quit()


def storeResult_report(store_result: StoreLoadResult) -> None:
    """
    Log the outcome of reading the persisted store

    Args:
        store_result: Store read result
    """
    if store_result.status is LoadStatus.PARSE_ERROR:
        logger.warning(store_result.describe())
    elif store_result.status is LoadStatus.READ_ERROR:
        logger.info(store_result.describe())
    else:
        logger.debug(store_result.describe())


def actionCatalog_print(catalog: ActionCatalog) -> None:
    """
    Print the action catalog to stdout

    Args:
        catalog: Action catalog
    """
    print("Config file commands accepted by twinslide:")
    for line in catalog.lines_format():
        print(line)


def _config_load(cli: CommandLineOptions) -> AppConfig | None:
    """Load YAML config, reporting fatal errors to stderr"""
    config_path: Path | None = Path(cli.config_path) if cli.config_path else None
    try:
        return ConfigLoader.config_load(config_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
    return None


def application_run(argv: Sequence[str] | None = None) -> int:
    """
    Run the launcher

    Args:
        argv: Arguments without program name, None for sys.argv

    Returns:
        Process exit status
    """
    store = PersistedStore()
    store_result = store.subset_load()

    cli = arguments_parse(argv)

    config = _config_load(cli)
    if config is None:
        return 1
    settings.initialize(config)
    logging_configure(settings.config.logging, level_override=cli.log_level)
    storeResult_report(store_result)

    try:
        frontend = frontend_load(settings.config.frontend.module)
    except FrontendLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = launchResolution_run(store_result, cli, frontend.actionCatalog_get)
    if isinstance(result, ActionCatalog):
        actionCatalog_print(result)
        return 0

    locks_init()
    application = Application(
        frontend=frontend,
        store=store,
        store_result=store_result,
        cli=cli,
        bindings=settings.config.bindings,
    )
    return application.run(result)
