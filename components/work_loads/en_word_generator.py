import random
import math
from collections import defaultdict


def _prefix_buckets(word_list):
  ## Group words sharing their first two letters
  ## This is to generate words with common prefixes
  bucket = defaultdict(list)
  for word in word_list:
    bucket[word[:2]].append(word)
  prefixes = list(bucket.keys())
  weights = [len(bucket[p]) for p in prefixes]
  return bucket, prefixes, weights


def generate_random_words(word_list, num_words, seed=None, unique=False):
  """
  Return n random words from word_list.
  - unique=False: sample with replacement (fast, allows duplicates)
  - unique=True: sample without replacement (requires n <= len(word_list))
  """
  if num_words < 1 or (unique is True and num_words > len(word_list)):
    raise ValueError(f"num_words must be between 1 and {len(word_list)}")
  rng = random.Random(seed)
  if unique:
    return rng.sample(word_list, num_words)
  return rng.choices(word_list, k=num_words)



def gen_words_with_prefix_freq(word_list, num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generates a list of words with a given prefix frequency.
  A higher prefix_freq means more consecutive words share their first two letters.
  Prefix frequency is applied logarithmically
  prefix_freq: 0 -> 0.999...
  """
  def _p_eff_log(x, max_mean=100) -> float:
    # Logarithmic mapping of prefix frequency to effective prefix frequency
    if x < 0 or x > 1:
      raise ValueError("Prefix frequency must be between 0 and 1")
    x = max(0.0, min(0.999999, x))
    k = math.log(max_mean)
    p = 1.0 - math.exp(-k * x)
    return min(p, 0.999999)
  prefix_freq = _p_eff_log(prefix_freq)

  if not word_list:
    raise ValueError("word_list must not be empty")
  max_unique = int(len(set(word_list)) // 1.1)
  if num_words < 1 or (unique is True and num_words > max_unique):
    raise ValueError(f"num_words must be between 1 and {max_unique}")
  rng = random.Random(seed)
  bucket, prefixes, weights = _prefix_buckets(word_list)

  rand_words_list = []
  if unique:
    seen = set()
    exhausted = set()

  while len(rand_words_list) < num_words:
    prefix = rng.choices(prefixes, weights=weights)[0]
    options = bucket[prefix]
    sample_word = rng.choice(options)
    if unique:
      if prefix in exhausted or sample_word in seen:
        continue
    rand_words_list.append(sample_word)
    if unique: seen.add(sample_word)

    trigger = rng.random()
    while trigger < prefix_freq and len(rand_words_list) < num_words:
      new_word = rng.choice(options)
      if unique:
        remaining = [w for w in options if (w not in seen)]
        if not remaining:
            exhausted.add(prefix)
            break
        if new_word in seen:
          new_word = rng.choice(remaining)
      rand_words_list.append(new_word)
      if unique: seen.add(new_word)
      trigger = rng.random()
  return rand_words_list
