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

from collections.abc import Iterable, Sequence
import itertools as it
from typing import TypeVar

T = TypeVar("T")


def spaces(n: int) -> str:
  """A run of `n` spaces; non-positive `n` gives the empty string."""
  return ' ' * max(n, 0)

def pad_right(s: str, width: int) -> str:
  # Pad amounts below zero clamp to no padding at all.
  return s + spaces(width - len(s))

def replicate(n: int, x: T) -> list[T]:
  return [x] * max(n, 0)

def take(xs: Sequence[T], n: int) -> list[T]:
  return list(xs[:max(n, 0)])

def split_lines(s: str) -> list[str]:
  """Splits on '\\n' only. Unlike str.splitlines, '' gives [''] and a trailing
  newline leaves a final empty line."""
  return s.split('\n')

def longest(lines: Iterable[str]) -> int:
  # Width is len(), i.e. Python code points; no grapheme or East Asian width.
  return max((len(l) for l in lines), default=0)

def interleave(sep: T, xs: Iterable[T]) -> list[T]:
  """Puts `sep` between consecutive elements of `xs`."""
  out: list[T] = []
  for i, x in enumerate(xs):
    if i:
      out.append(sep)
    out.append(x)
  return out

def pad_with(xs: Iterable[T], fill: T) -> Iterable[T]:
  """`xs` followed by `fill` forever."""
  return it.chain(xs, it.repeat(fill))
