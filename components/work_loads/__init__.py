from components.work_loads.en_word_generator import generate_random_words, gen_words_with_prefix_freq
from components.work_loads.synthetic import number_to_word, synthetic_words
from components.work_loads.vocabulary import VocabularyConfig, faker_vocabulary


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def words(self, word_list, num_words, p_freq=0, unique=False):
        if p_freq > 0:
            return gen_words_with_prefix_freq(word_list, num_words, p_freq, self.seed, unique)
        else:
            return generate_random_words(word_list, num_words, self.seed, unique)

    def synthetic(self, count, radix=13, start=0):
        return list(synthetic_words(count, radix, start))

    def vocabulary(self, num_words):
        return faker_vocabulary(num_words, VocabularyConfig(seed=self.seed))
