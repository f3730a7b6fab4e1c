"""Service layer: conversion use cases returning ServiceResult.

Services may import from domain and config.
They must never import from commands or output.
"""
