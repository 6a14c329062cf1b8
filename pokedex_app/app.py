from __future__ import annotations
import logging
from functools import partial
from typing import Optional

import requests

from pokedex_app.config import Settings
from pokedex_app.controllers.pokedex_controller import PokedexController
from pokedex_app.db.base import engine as default_engine, make_engine
from pokedex_app.services.catalog_provider import fetch_catalog
from pokedex_app.services.preferences import PreferenceStore
from pokedex_app.utils.logging_setup import setup_logging

log = logging.getLogger(__name__)


def create_controller(settings: Optional[Settings] = None,
                      session: Optional[requests.Session] = None,
                      load: bool = True) -> PokedexController:
    """
    Arma el controlador con la configuración del entorno y, si load=True,
    lanza la descarga inicial del catálogo.
    """
    if settings is None:
        settings = Settings.from_env()
        engine = default_engine
    else:
        engine = make_engine(settings.db_url)
    setup_logging(level=settings.log_level, log_to_file=settings.log_dir is not None, log_dir=settings.log_dir)

    store = PreferenceStore(engine)

    fetcher = partial(
        fetch_catalog,
        session=session,
        list_url=settings.list_url,
        timeout=settings.http_timeout,
        max_workers=settings.max_workers,
    )
    controller = PokedexController(fetcher, store, page_limit=settings.page_limit)
    if load:
        controller.load_catalog()
        log.info("Estado inicial: %s (%d Pokémon)", controller.catalog.status.value, len(controller.catalog.entities))
    return controller
