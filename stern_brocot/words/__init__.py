from .christoffel import christoffel_word, standard_factorization, is_christoffel_word
