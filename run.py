#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Entry point
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from config import HOST, PORT, APP_NAME, VERSION, LOG_LEVEL
from kti.app import create_app
from kti.logging_setup import configure_logging


# ========================================================
# MAIN
# ========================================================
if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    app = create_app()
    logging.getLogger("kti").info("%s v%s running on http://%s:%s",
                                  APP_NAME, VERSION, HOST, PORT)
    app.run(host=HOST, port=PORT, debug=False)
