from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .directory import Directory


class MakernoteFormat(NamedTuple):
    """
    Static description of one makernote layout: the directory name, the
    ``{tag: (name, formatter)}`` table, array expanders keyed by tag and the
    hooks to run once every entry has been stored.
    """
    name: str
    tags: Dict[int, tuple]
    array_tags: Optional[Dict[int, Callable]] = None
    post_processors: Tuple[Callable, ...] = ()


class Tag:
    """
    Eases dealing with tags.

    A lightweight view over one populated entry of a directory: the id, the
    resolved name and the rendered description.
    """
    def __init__(self, tag: int, directory: 'Directory'):
        self.tag = tag
        self.directory = directory
        self.tag_id: str = '0x%04X' % (tag)

    @property
    def tag_name(self) -> str:
        return self.directory.get_tag_name(self.tag)

    @property
    def has_tag_name(self) -> bool:
        return self.directory.has_tag_name(self.tag)

    @property
    def description(self) -> Optional[str]:
        return self.directory.get_description(self.tag)

    @property
    def values(self) -> Any:
        return self.directory.get_object(self.tag)

    @property
    def printable(self) -> str:
        """
        Printable representation of tag.
        """
        description = self.description
        if description is None:
            description = self.directory.get_string(self.tag)
        if description is None:
            return ''
        return description

    def __str__(self) -> str:
        return '[{}] {} - {}'.format(
            self.directory.name,
            self.tag_name,
            self.printable
        )

    def __repr__(self) -> str:
        return '<{}.{} tag_id={}, name={}, value={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.tag_id,
            self.tag_name,
            self.printable,
            hex(id(self))
        )
