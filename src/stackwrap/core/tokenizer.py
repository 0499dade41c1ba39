"""
Argument Tokenizer.

Splits the argument list of a ``return`` statement into its top-level
arguments. Only parenthesis depth is tracked: brackets, braces and string
literals are not understood, so a comma inside ``"a, b"`` or ``{a, b}`` still
splits.
"""

from typing import List


def tokenize_args(args: str) -> List[str]:
  """
  Splits a comma-separated argument string on top-level commas.

  Commas nested inside ``(...)`` at any depth stay inside the current token.
  Unbalanced parentheses are tolerated: the depth counter simply goes wrong
  and the split degrades, it never raises.

  Args:
      args (str): The text following ``return `` on a line.

  Returns:
      List[str]: The arguments in order, each stripped of surrounding
      whitespace. Always has at least one element; empty input yields ``[""]``.

  Example:
      >>> tokenize_args("a, f(b, c), d")
      ['a', 'f(b, c)', 'd']
  """
  tokens: List[str] = []
  current: List[str] = []
  depth = 0

  for char in args:
    if char == "," and depth == 0:
      tokens.append("".join(current))
      current = []
      continue

    if char == "(":
      depth += 1
    elif char == ")":
      depth -= 1

    current.append(char)

  tokens.append("".join(current))

  return [token.strip() for token in tokens]
