# Bundled emoji catalog, in display order. Labels and tags are lowercase.
EMOJI_CATALOG = [
    {"glyph": "😀", "label": "grinning face", "tags": ["face", "grin", "happy"]},
    {"glyph": "😄", "label": "grinning face with smiling eyes", "tags": ["face", "smile", "happy"]},
    {"glyph": "😂", "label": "face with tears of joy", "tags": ["face", "laugh", "joy", "tears"]},
    {"glyph": "🤣", "label": "rolling on the floor laughing", "tags": ["face", "laugh", "lol"]},
    {"glyph": "😊", "label": "smiling face with smiling eyes", "tags": ["face", "smile", "blush"]},
    {"glyph": "🙃", "label": "upside-down face", "tags": ["face", "silly", "sarcasm"]},
    {"glyph": "🐱", "label": "cat face", "tags": ["animal", "cat", "pet"]},
    {"glyph": "🐶", "label": "dog face", "tags": ["animal", "dog", "pet"]},
    {"glyph": "🐵", "label": "monkey face", "tags": ["animal", "monkey"]},
    {"glyph": "🐭", "label": "mouse face", "tags": ["animal", "mouse"]},
    {"glyph": "🐰", "label": "rabbit face", "tags": ["animal", "rabbit", "bunny"]},
    {"glyph": "🍎", "label": "red apple", "tags": ["fruit", "apple", "red"]},
    {"glyph": "🍌", "label": "banana", "tags": ["fruit", "yellow"]},
    {"glyph": "🍇", "label": "grapes", "tags": ["fruit", "grape", "purple"]},
    {"glyph": "🍓", "label": "strawberry", "tags": ["fruit", "berry", "red"]},
    {"glyph": "🍊", "label": "tangerine", "tags": ["fruit", "orange", "citrus"]},
    {"glyph": "🥕", "label": "carrot", "tags": ["vegetable", "orange"]},
    {"glyph": "🍕", "label": "pizza", "tags": ["food", "cheese"]},
    {"glyph": "❤️", "label": "red heart", "tags": ["heart", "love", "red"]},
    {"glyph": "🚀", "label": "rocket", "tags": ["space", "launch"]},
    {"glyph": "🔥", "label": "fire", "tags": ["flame", "hot"]},
    {"glyph": "🎉", "label": "party popper", "tags": ["party", "celebration"]},
    {"glyph": "👍", "label": "thumbs up", "tags": ["approve", "ok", "hand"]},
]
