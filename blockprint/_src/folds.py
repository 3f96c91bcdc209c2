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

"""Folding collections of documents into one.

`Stack` and `Columns` are two ways of combining the same `Doc` values: each
pairs a binary composition (`atop` or `beside`) with the empty 0x0 document
as its identity. `fold` reduces an ordered collection under either one.
"""

from __future__ import annotations

from collections.abc import Iterable
import functools
import logging
from typing import NamedTuple, Union

from blockprint._src.doc import Doc, atop, beside, empty
from blockprint._src.util import interleave

logger = logging.getLogger(__name__)


class Stack(NamedTuple):
  """A Doc combined with others by stacking them vertically."""
  doc: Doc

  @classmethod
  def identity(cls) -> Stack:
    return cls(empty(0, 0))

  def combine(self, other: Stack) -> Stack:
    return Stack(atop(self.doc, other.doc))


class Columns(NamedTuple):
  """A Doc combined with others by placing them side by side."""
  doc: Doc

  @classmethod
  def identity(cls) -> Columns:
    return cls(empty(0, 0))

  def combine(self, other: Columns) -> Columns:
    return Columns(beside(self.doc, other.doc))


Strategy = Union[type[Stack], type[Columns]]


def fold(strategy: Strategy, docs: Iterable[Doc]) -> Doc:
  """Reduces `docs` in order under `strategy`, starting from its identity.

  The identity goes on the left of the first document, so folding a single
  document gives that document back.
  """
  wrapped = [strategy(d) for d in docs]
  logger.debug("Folding %d documents with %s", len(wrapped), strategy.__name__)
  return functools.reduce(strategy.combine, wrapped, strategy.identity()).doc


def combine_vertically(docs: Iterable[Doc]) -> Doc:
  return fold(Stack, docs)

def combine_horizontally(docs: Iterable[Doc]) -> Doc:
  return fold(Columns, docs)

vcat = combine_vertically
hcat = combine_horizontally


def hjoin(sep: Doc, docs: Iterable[Doc]) -> Doc:
  """Places `docs` side by side with `sep` between each neighbouring pair."""
  return combine_horizontally(interleave(sep, docs))

def vjoin(sep: Doc, docs: Iterable[Doc]) -> Doc:
  """Stacks `docs` with `sep` between each neighbouring pair."""
  return combine_vertically(interleave(sep, docs))
