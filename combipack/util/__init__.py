from .multichoose import multichoose
