"""Character, memory, string, conversion, stream output, linked-list and printf-style helpers."""