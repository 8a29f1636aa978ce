"""Finite fields, Goppa codes and helpers for building linear codes."""