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

"""Process-wide blockprint options.

``blockprint_enable_checks`` validates every doc as it is built, and
``blockprint_debug_log_modules`` names the loggers whose DEBUG records go to
stderr. Both start out from the matching ``BLOCKPRINT_*`` environment
variable and change through ``config.update``. Checks can also be switched
for the current thread only, with ``enable_checks``.
"""

from __future__ import annotations

from collections.abc import Iterator
import contextlib
import logging
import os
import threading
from typing import Any, Callable, Optional

from blockprint._src import logging_config

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({'y', 'yes', 't', 'true', 'on', '1'})
_FALSY = frozenset({'n', 'no', 'f', 'false', 'off', '0'})


def bool_env(varname: str, default: bool) -> bool:
  """Reads `varname` from the environment as a boolean.

  Accepts the (case insensitive) spellings in _TRUTHY and _FALSY and raises
  ValueError for anything else.
  """
  raw = os.environ.get(varname)
  if raw is None:
    return default
  val = raw.lower()
  if val in _TRUTHY:
    return True
  if val in _FALSY:
    return False
  raise ValueError(f"invalid truth value {val!r} for environment {varname!r}")


_unset = object()


class Config:
  """Option values, with per-thread overrides taking precedence."""

  def __init__(self):
    self._values: dict[str, Any] = {}
    self._on_update: dict[str, Callable[[Any], None]] = {}
    self._overrides = threading.local()

  def define(self, name: str, default: Any,
             on_update: Optional[Callable[[Any], None]] = None) -> None:
    if name in self._values:
      raise Exception(f"Config option {name} already defined")
    self._values[name] = default
    if on_update is not None:
      self._on_update[name] = on_update
      on_update(default)

  def update(self, name: str, val: Any) -> None:
    if name not in self._values:
      raise AttributeError(f"Unrecognized config option: {name}")
    logger.debug("Setting config option %s to %r", name, val)
    self._values[name] = val
    if name in self._on_update:
      self._on_update[name](val)

  def read(self, name: str) -> Any:
    local = vars(self._overrides)
    if name in local:
      return local[name]
    try:
      return self._values[name]
    except KeyError:
      raise AttributeError(f"Unrecognized config option: {name}") from None

  def __getattr__(self, name: str) -> Any:
    if name.startswith('_'):
      raise AttributeError(name)
    return self.read(name)

  @contextlib.contextmanager
  def override(self, name: str, val: Any) -> Iterator[None]:
    """Sets `name` to `val` for the current thread inside the block."""
    if name not in self._values:
      raise AttributeError(f"Unrecognized config option: {name}")
    local = vars(self._overrides)
    prev = local.get(name, _unset)
    local[name] = val
    try:
      yield
    finally:
      if prev is _unset:
        del local[name]
      else:
        local[name] = prev


config = Config()

config.define('blockprint_enable_checks',
              bool_env('BLOCKPRINT_ENABLE_CHECKS', False))

config.define('blockprint_debug_log_modules',
              os.environ.get('BLOCKPRINT_DEBUG_LOG_MODULES', ''),
              on_update=logging_config.set_debug_modules)


def enable_checks(new_val: bool = True):
  """Turns invariant checks on (or off) for the current thread.

      with blockprint.enable_checks():
        doc = blockprint.beside(a, b)   # validated
  """
  if type(new_val) is not bool:
    raise ValueError(f"enable_checks needs a bool, got {new_val!r} of type "
                     f"{type(new_val)}.")
  return config.override('blockprint_enable_checks', new_val)
