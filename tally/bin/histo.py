#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from sys import stdin
from typing import Iterable

from tally.exceptions import HistogramError
from tally.histogram import Histogram
from tally.stats import histogram_stats


def main() -> None:
  arg_parser = ArgumentParser(description='Summarize integer samples and draw a histogram of them.')
  arg_parser.add_argument('samples', nargs='*', help='Integer samples, separated by whitespace or commas. Defaults to stdin.')
  arg_parser.add_argument('-width', type=int, default=0,
    help='scale bars so that the tallest is this many characters; 0 draws one character per sample.')
  arg_parser.add_argument('-key-fmt', default='d', help='format spec applied to each key; defaults to "d".')
  arg_parser.add_argument('-no-chart', action='store_true', help='print only the summary line.')
  arg_parser.add_argument('-alloc', nargs=2, type=int, metavar=('MIN', 'MAX'),
    help='preallocate buckets for MIN through MAX; the chart then includes empty buckets in that range.')
  args = arg_parser.parse_args()

  words = args.samples or list(stdin)
  try: samples = parse_samples(words)
  except ValueError as e: exit(f'histo error: {e}')

  try:
    report = tally_report(samples, width=args.width, key_fmt=args.key_fmt, chart=not args.no_chart,
      alloc=tuple(args.alloc) if args.alloc else None)
  except HistogramError as e: exit(f'histo error: {e}')
  print(report)


def parse_samples(words:Iterable[str]) -> list[int]:
  'Parse integers from strings containing whitespace or comma separated values.'
  return [int(s) for word in words for s in word.replace(',', ' ').split()]


def tally_report(samples:list[int], width=0, key_fmt='d', chart=True, alloc:tuple[int,int]|None=None) -> str:
  '''
  Build the histogram for `samples` and return the summary line, followed by the bar chart if `chart` is set.
  Without `alloc`, an empty list of samples raises `InvalidArgument`.
  '''
  if alloc:
    hist = Histogram.with_range(*alloc)
    hist.update(samples)
  else:
    hist = Histogram(samples)
  lines = [str(histogram_stats(hist))]
  if chart:
    lines.append(hist.bar_chart(max_width=width, key_fmt=key_fmt))
  return '\n'.join(lines)


if __name__ == '__main__': main()
