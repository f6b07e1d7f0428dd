# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass
from math import sqrt

from .histogram import Histogram


@dataclass(frozen=True)
class HistogramStats:
  count:int
  min:int
  max:int
  mean:float
  variance:float
  std_dev:float
  max_height:int

  def __str__(self) -> str:
    return f'count: {self.count};  min: {self.min};  max: {self.max};  mean: {self.mean:.4f};  ' \
      f'variance: {self.variance:.4f};  std_dev: {self.std_dev:.4f};  max_height: {self.max_height}'


def histogram_stats(hist:Histogram) -> HistogramStats:
  '''
  Summarize `hist`. A histogram without any positive bucket, or whose counts sum to zero,
  yields zeros for everything but `count`.
  '''
  count = hist.sample_count()
  if count == 0 or not any(c > 0 for _, c in hist.items()):
    return HistogramStats(count=count, min=0, max=0, mean=0.0, variance=0.0, std_dev=0.0, max_height=0)
  mean, variance = hist.mean_and_variance()
  return HistogramStats(
    count=count,
    min=hist.min,
    max=hist.max,
    mean=mean,
    variance=variance,
    std_dev=sqrt(variance),
    max_height=hist.max_height())
