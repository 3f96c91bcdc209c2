# Copyright 2026 The Blockprint Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
import sys

# e.g. DEBUG:blockprint._src.folds:71: Folding 3 documents with Stack
debug_handler = logging.StreamHandler(sys.stderr)
debug_handler.setLevel(logging.DEBUG)
debug_handler.setFormatter(
    logging.Formatter("{levelname}:{name}:{lineno}: {message}", style='{'))

# logger name -> level it had before we turned it up
_saved_levels: dict[str, int] = {}


def set_debug_modules(module_names: str | None) -> None:
  """Sends DEBUG records of each comma-separated logger to stderr.

  Loggers switched on by an earlier call and missing from `module_names` go
  back to the level they had before.
  """
  wanted = [n.strip() for n in (module_names or '').split(',') if n.strip()]
  for name in list(_saved_levels):
    if name not in wanted:
      logger = logging.getLogger(name)
      logger.removeHandler(debug_handler)
      logger.setLevel(_saved_levels.pop(name))
  for name in wanted:
    if name in _saved_levels:
      continue
    logger = logging.getLogger(name)
    _saved_levels[name] = logger.level
    logger.addHandler(debug_handler)
    logger.setLevel(logging.DEBUG)


def debug_modules() -> list[str]:
  return list(_saved_levels)
