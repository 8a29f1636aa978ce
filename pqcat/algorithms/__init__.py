"""Decoding attacks: information set decoding variants, MMT and Patterson decoding."""