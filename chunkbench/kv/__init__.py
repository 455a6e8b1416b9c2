"""Bucketed in-memory key-value store and its read/write benchmark."""