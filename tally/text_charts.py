# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Iterable


def chart_bars(items:Iterable[tuple[int,int]], max_width=0, key_fmt='d', marker='X', sep='|') -> str:
  '''
  Create a horizontal bar chart from an iterable of key/count pairs, one line per pair.
  Each line is the key formatted with `key_fmt` and right-aligned to the widest key, then `sep`, then the bar.
  If `max_width` is positive, bars are scaled so that the tallest bar is `max_width` markers long,
  rounding partial markers up; otherwise each unit of count is drawn as one marker.
  Lines are separated by newlines, with no trailing newline.
  '''
  pairs = list(items)
  if not pairs: return ''

  labels = [format(k, key_fmt) for k, _ in pairs]
  label_width = max(len(l) for l in labels)
  tallest = max(c for _, c in pairs)

  return '\n'.join(
    chart_bar_line(label, bar_len(count, max_width=max_width, tallest=tallest), label_width=label_width, marker=marker, sep=sep)
    for label, (_, count) in zip(labels, pairs))


def chart_bar_line(label:str, length:int, label_width:int, marker='X', sep='|') -> str:
  'Create a string for a single line of a bar chart.'
  return f'{label:>{label_width}}{sep}{marker * length}'


def bar_len(count:int, max_width:int, tallest:int) -> int:
  '''
  Return the number of markers for `count`: `ceil(count * max_width / tallest)`, computed exactly.
  Unscaled (one marker per unit) if `max_width` or `tallest` is not positive. Non-positive counts have no markers.
  '''
  if count <= 0: return 0
  if max_width <= 0 or tallest <= 0: return count
  return -(-count * max_width // tallest)



if __name__ == '__main__':
  print(chart_bars([(-2, 1), (-1, 0), (0, 4), (1, 7), (2, 3)]))
  print()
  print(chart_bars([(-2, 1), (-1, 0), (0, 4), (1, 7), (2, 3)], max_width=20, key_fmt='+d'))
