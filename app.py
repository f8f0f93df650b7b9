#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Точка входа бота-анкеты
"""

import logging
import sys

from config.settings import BotConfig
from core.bot import SurveyBot
from core.exceptions import ConfigError
from utils.logger import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    config = BotConfig()
    bot_logger = setup_logging(config.log_level_value, config.log_dir)
    bot_logger.log_startup_info(config.to_dict())

    try:
        config.validate()
        bot = SurveyBot(config)
    except ConfigError as e:
        logger.critical(f"❌ {e}")
        sys.exit(1)

    bot.run()


if __name__ == "__main__":
    main()
