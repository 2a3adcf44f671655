# mapview/app/controllers/names.py
from mapview.app.events import NodeParsed
from mapview.domain.names.trie import PrefixIndex


class NameHandler:
    def __init__(self, index: PrefixIndex):
        self.index = index

    def on_node(self, ev: NodeParsed):
        name = ev.tags.get("name")
        if name:
            self.index.insert(name, ev.id)
