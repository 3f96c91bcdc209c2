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

# Note: import <name> as <name> is required for names to be exported.
# See PEP 484 & https://github.com/jax-ml/jax/issues/7570

from blockprint._src.config import (
  config as config,
  enable_checks as enable_checks,
)
from blockprint._src.errors import DocInvariantError as DocInvariantError

from blockprint._src.doc import (
  Doc as Doc,
  atop as atop,
  beside as beside,
  check_doc as check_doc,
  empty as empty,
  height as height,
  indent as indent,
  render as render,
  text as text,
  width as width,
)
from blockprint._src.folds import (
  Columns as Columns,
  Stack as Stack,
  combine_horizontally as combine_horizontally,
  combine_vertically as combine_vertically,
  fold as fold,
  hcat as hcat,
  hjoin as hjoin,
  vcat as vcat,
  vjoin as vjoin,
)

from blockprint.version import __version__ as __version__
from blockprint.version import __version_info__ as __version_info__
