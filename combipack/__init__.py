from combipack.packer import NUM_CODES, Quadruple, decode, encode
from combipack.util import multichoose
