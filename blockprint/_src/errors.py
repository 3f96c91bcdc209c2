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


class DocInvariantError(Exception):
  """Raised by document checks when a Doc's fields disagree with its lines.

  Composition never raises this on its own. It only surfaces from
  :func:`blockprint.check_doc` or while ``blockprint_enable_checks`` is on.
  """

  def __init__(self, message: str, doc=None):
    super().__init__(message)
    self.doc = doc
