#  Licensed to Elasticsearch B.V. under one or more contributor
#  license agreements. See the NOTICE file distributed with
#  this work for additional information regarding copyright
#  ownership. Elasticsearch B.V. licenses this file to you under
#  the Apache License, Version 2.0 (the "License"); you may
#  not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
# 	http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing,
#  software distributed under the License is distributed on an
#  "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#  KIND, either express or implied.  See the License for the
#  specific language governing permissions and limitations
#  under the License.

"""
Request types for the Indices API. Each request only holds what the
caller asked for; unset (``None``) fields are neither sent as query
parameters nor serialized into the body.
"""

from typing import (
    Any,
    Collection,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from esindices.common import IndicesOptions
from esindices.utils import to_list

NAMES_TYPE = Optional[Union[str, Collection[str]]]
ACTIVE_SHARDS_TYPE = Optional[Union[int, str]]


class Alias:
    """
    An alias to create together with an index, a resized index,
    a rolled over index or an index template.
    """

    def __init__(
        self,
        name: str,
        *,
        filter: Optional[Mapping[str, Any]] = None,
        routing: Optional[str] = None,
        index_routing: Optional[str] = None,
        search_routing: Optional[str] = None,
        is_write_index: Optional[bool] = None,
        is_hidden: Optional[bool] = None,
    ):
        self.name = name
        self.filter = filter
        self.routing = routing
        self.index_routing = index_routing
        self.search_routing = search_routing
        self.is_write_index = is_write_index
        self.is_hidden = is_hidden

    def to_dict(self) -> Dict[str, Any]:
        return {
            self.name: {
                k: v for k, v in self.__dict__.items() if v is not None and k != "name"
            }
        }


ALIASES_TYPE = Optional[Union[Mapping[str, Mapping[str, Any]], Collection[Alias]]]


def _aliases_to_dict(aliases: ALIASES_TYPE) -> Optional[Dict[str, Any]]:
    if aliases is None:
        return None
    if isinstance(aliases, Mapping):
        return {name: dict(definition) for name, definition in aliases.items()}
    body: Dict[str, Any] = {}
    for alias in aliases:
        body.update(alias.to_dict())
    return body


def _drop_none(body: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in body.items() if v is not None}


class IndicesRequest:
    """Base class of requests that target one or more indices"""

    def __init__(
        self, indices: NAMES_TYPE, indices_options: Optional[IndicesOptions] = None
    ):
        self.indices: List[str] = to_list(indices)
        self.indices_options = indices_options

    def __repr__(self) -> str:
        return f"{type(self).__name__}(indices={self.indices!r})"


class CreateIndexRequest:
    """
    Creates an index with optional settings, mappings and aliases.

    Parameters
    ----------
    index: str
        Name of the index to create
    settings: Mapping[str, Any]
        Index settings, nested or with dotted keys
    mappings: Mapping[str, Any]
        Mapping definition, e.g. ``{"properties": {"title": {"type": "text"}}}``
    aliases: Mapping or collection of Alias
        Aliases to create along with the index
    """

    def __init__(
        self,
        index: str,
        *,
        settings: Optional[Mapping[str, Any]] = None,
        mappings: Optional[Mapping[str, Any]] = None,
        aliases: ALIASES_TYPE = None,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        wait_for_active_shards: ACTIVE_SHARDS_TYPE = None,
    ):
        self.index = index
        self.settings = settings
        self.mappings = mappings
        self.aliases = aliases
        self.timeout = timeout
        self.master_timeout = master_timeout
        self.wait_for_active_shards = wait_for_active_shards

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "settings": self.settings,
                "mappings": self.mappings,
                "aliases": _aliases_to_dict(self.aliases),
            }
        )

    def __repr__(self) -> str:
        return f"CreateIndexRequest(index={self.index!r})"


class DeleteIndexRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE,
        *,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.timeout = timeout
        self.master_timeout = master_timeout


class OpenIndexRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE,
        *,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        wait_for_active_shards: ACTIVE_SHARDS_TYPE = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.timeout = timeout
        self.master_timeout = master_timeout
        self.wait_for_active_shards = wait_for_active_shards


class CloseIndexRequest(OpenIndexRequest):
    pass


class FreezeIndexRequest(OpenIndexRequest):
    """Freezes indices, making them read-only with a minimal memory footprint"""


class UnfreezeIndexRequest(OpenIndexRequest):
    pass


class GetIndexRequest(IndicesRequest):
    """
    Retrieves indices with their aliases, mappings and settings.
    Also used to check whether indices exist.
    """

    def __init__(
        self,
        indices: NAMES_TYPE,
        *,
        local: Optional[bool] = None,
        human: Optional[bool] = None,
        include_defaults: Optional[bool] = None,
        master_timeout: Optional[str] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.local = local
        self.human = human
        self.include_defaults = include_defaults
        self.master_timeout = master_timeout


class PutMappingRequest(IndicesRequest):
    """
    Adds new fields to an existing mapping, or changes the search
    settings of existing fields.

    Parameters
    ----------
    indices: str or collection of str
        Indices to update
    source: Mapping[str, Any]
        The mapping body, e.g. ``{"properties": {"year": {"type": "integer"}}}``
    """

    def __init__(
        self,
        indices: NAMES_TYPE,
        *,
        source: Mapping[str, Any],
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.source = source
        self.timeout = timeout
        self.master_timeout = master_timeout

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.source)


class GetMappingsRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        local: Optional[bool] = None,
        master_timeout: Optional[str] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.local = local
        self.master_timeout = master_timeout


class GetFieldMappingsRequest(IndicesRequest):
    def __init__(
        self,
        fields: Union[str, Collection[str]],
        *,
        indices: NAMES_TYPE = None,
        include_defaults: Optional[bool] = None,
        local: Optional[bool] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.fields = to_list(fields)
        self.include_defaults = include_defaults
        self.local = local


class UpdateSettingsRequest(IndicesRequest):
    """
    Changes dynamic index settings. With ``preserve_existing=True``
    settings that are already set on an index are left untouched.
    """

    def __init__(
        self,
        indices: NAMES_TYPE,
        *,
        settings: Mapping[str, Any],
        preserve_existing: Optional[bool] = None,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.settings = settings
        self.preserve_existing = preserve_existing
        self.timeout = timeout
        self.master_timeout = master_timeout

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.settings)


class GetSettingsRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        names: NAMES_TYPE = None,
        include_defaults: Optional[bool] = None,
        local: Optional[bool] = None,
        master_timeout: Optional[str] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.names = to_list(names)
        self.include_defaults = include_defaults
        self.local = local
        self.master_timeout = master_timeout


class AliasAction:
    """
    A single action of an update aliases request.

    Use the :meth:`add`, :meth:`remove` and :meth:`remove_index`
    constructors rather than instantiating this directly.
    """

    ADD = "add"
    REMOVE = "remove"
    REMOVE_INDEX = "remove_index"

    def __init__(
        self,
        action_type: str,
        *,
        indices: NAMES_TYPE,
        aliases: NAMES_TYPE = None,
        filter: Optional[Mapping[str, Any]] = None,
        routing: Optional[str] = None,
        index_routing: Optional[str] = None,
        search_routing: Optional[str] = None,
        is_write_index: Optional[bool] = None,
        is_hidden: Optional[bool] = None,
        must_exist: Optional[bool] = None,
    ):
        if action_type not in (self.ADD, self.REMOVE, self.REMOVE_INDEX):
            raise ValueError(f"Unknown alias action type {action_type!r}")
        self.action_type = action_type
        self.indices = to_list(indices)
        self.aliases = to_list(aliases)
        if not self.indices:
            raise ValueError("One or more indices must be specified")
        if action_type == self.REMOVE_INDEX:
            if self.aliases:
                raise ValueError(
                    f"Aliases are not supported for {action_type!r} actions"
                )
        elif not self.aliases:
            raise ValueError(
                f"One or more aliases must be specified for {action_type!r} actions"
            )
        self.filter = filter
        self.routing = routing
        self.index_routing = index_routing
        self.search_routing = search_routing
        self.is_write_index = is_write_index
        self.is_hidden = is_hidden
        self.must_exist = must_exist

    @classmethod
    def add(
        cls, indices: NAMES_TYPE, aliases: NAMES_TYPE, **kwargs: Any
    ) -> "AliasAction":
        return cls(cls.ADD, indices=indices, aliases=aliases, **kwargs)

    @classmethod
    def remove(
        cls, indices: NAMES_TYPE, aliases: NAMES_TYPE, **kwargs: Any
    ) -> "AliasAction":
        return cls(cls.REMOVE, indices=indices, aliases=aliases, **kwargs)

    @classmethod
    def remove_index(cls, indices: NAMES_TYPE) -> "AliasAction":
        return cls(cls.REMOVE_INDEX, indices=indices)

    def to_dict(self) -> Dict[str, Any]:
        action: Dict[str, Any] = {"indices": self.indices}
        if self.aliases:
            action["aliases"] = self.aliases
        action.update(
            _drop_none(
                {
                    "filter": self.filter,
                    "routing": self.routing,
                    "index_routing": self.index_routing,
                    "search_routing": self.search_routing,
                    "is_write_index": self.is_write_index,
                    "is_hidden": self.is_hidden,
                    "must_exist": self.must_exist,
                }
            )
        )
        return {self.action_type: action}

    def __repr__(self) -> str:
        return (
            f"AliasAction({self.action_type!r}, indices={self.indices!r}, "
            f"aliases={self.aliases!r})"
        )


class IndicesAliasesRequest:
    """
    Atomically applies a list of alias actions.

    >>> request = IndicesAliasesRequest([AliasAction.add("logs-1", "logs")])
    >>> request.add_alias_action(AliasAction.remove("logs-0", "logs")).to_dict()
    {'actions': [{'add': {'indices': ['logs-1'], 'aliases': ['logs']}}, {'remove': {'indices': ['logs-0'], 'aliases': ['logs']}}]}
    """

    def __init__(
        self,
        actions: Optional[Sequence[AliasAction]] = None,
        *,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
    ):
        self.actions: List[AliasAction] = list(actions or ())
        self.timeout = timeout
        self.master_timeout = master_timeout

    def add_alias_action(self, action: AliasAction) -> "IndicesAliasesRequest":
        self.actions.append(action)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"actions": [action.to_dict() for action in self.actions]}

    def __repr__(self) -> str:
        return f"IndicesAliasesRequest(actions={self.actions!r})"


class GetAliasesRequest(IndicesRequest):
    """Retrieves aliases, or checks whether aliases exist"""

    def __init__(
        self,
        aliases: NAMES_TYPE = None,
        *,
        indices: NAMES_TYPE = None,
        local: Optional[bool] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.aliases = to_list(aliases)
        self.local = local

    def __repr__(self) -> str:
        return f"GetAliasesRequest(aliases={self.aliases!r}, indices={self.indices!r})"


class RefreshRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)


class SyncedFlushRequest(RefreshRequest):
    pass


class FlushRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        force: Optional[bool] = None,
        wait_if_ongoing: Optional[bool] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.force = force
        self.wait_if_ongoing = wait_if_ongoing


class ForceMergeRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        max_num_segments: Optional[int] = None,
        only_expunge_deletes: Optional[bool] = None,
        flush: Optional[bool] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.max_num_segments = max_num_segments
        self.only_expunge_deletes = only_expunge_deletes
        self.flush = flush


class ClearIndicesCacheRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        query: Optional[bool] = None,
        fielddata: Optional[bool] = None,
        request: Optional[bool] = None,
        fields: NAMES_TYPE = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.query = query
        self.fielddata = fielddata
        self.request = request
        self.fields = to_list(fields)


class ResizeRequest:
    """
    Shrinks or splits ``source_index`` into a new ``target_index``.
    The same request type is used by both operations, the operation
    is chosen by the client method that sends it.
    """

    def __init__(
        self,
        source_index: str,
        target_index: str,
        *,
        settings: Optional[Mapping[str, Any]] = None,
        aliases: ALIASES_TYPE = None,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        wait_for_active_shards: ACTIVE_SHARDS_TYPE = None,
    ):
        self.source_index = source_index
        self.target_index = target_index
        self.settings = settings
        self.aliases = aliases
        self.timeout = timeout
        self.master_timeout = master_timeout
        self.wait_for_active_shards = wait_for_active_shards

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {"settings": self.settings, "aliases": _aliases_to_dict(self.aliases)}
        )

    def __repr__(self) -> str:
        return (
            f"ResizeRequest(source_index={self.source_index!r}, "
            f"target_index={self.target_index!r})"
        )


class RolloverRequest:
    """
    Rolls an alias over to a new index when one of the conditions is met
    (or unconditionally when no condition is given).

    Parameters
    ----------
    alias: str
        The alias to roll over
    new_index_name: str
        Name of the new index. If not set the name is generated from the
        current index name, which must then end with a number, e.g. 'logs-000001'
    max_age: str
        e.g. '7d'
    max_docs: int
    max_size: str
        e.g. '5gb'
    dry_run: bool
        Only check the conditions, don't roll over
    """

    def __init__(
        self,
        alias: str,
        new_index_name: Optional[str] = None,
        *,
        max_age: Optional[str] = None,
        max_docs: Optional[int] = None,
        max_size: Optional[str] = None,
        settings: Optional[Mapping[str, Any]] = None,
        mappings: Optional[Mapping[str, Any]] = None,
        aliases: ALIASES_TYPE = None,
        dry_run: Optional[bool] = None,
        timeout: Optional[str] = None,
        master_timeout: Optional[str] = None,
        wait_for_active_shards: ACTIVE_SHARDS_TYPE = None,
    ):
        self.alias = alias
        self.new_index_name = new_index_name
        self.max_age = max_age
        self.max_docs = max_docs
        self.max_size = max_size
        self.settings = settings
        self.mappings = mappings
        self.aliases = aliases
        self.dry_run = dry_run
        self.timeout = timeout
        self.master_timeout = master_timeout
        self.wait_for_active_shards = wait_for_active_shards

    @property
    def conditions(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "max_age": self.max_age,
                "max_docs": self.max_docs,
                "max_size": self.max_size,
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "conditions": self.conditions or None,
                "settings": self.settings,
                "mappings": self.mappings,
                "aliases": _aliases_to_dict(self.aliases),
            }
        )

    def __repr__(self) -> str:
        return (
            f"RolloverRequest(alias={self.alias!r}, "
            f"new_index_name={self.new_index_name!r})"
        )


class PutIndexTemplateRequest:
    """
    Creates or updates a (legacy) index template. With ``create=True``
    the request fails if a template with the same name already exists.
    """

    def __init__(
        self,
        name: str,
        *,
        index_patterns: Union[str, Collection[str]],
        order: Optional[int] = None,
        version: Optional[int] = None,
        settings: Optional[Mapping[str, Any]] = None,
        mappings: Optional[Mapping[str, Any]] = None,
        aliases: ALIASES_TYPE = None,
        create: bool = False,
        cause: Optional[str] = None,
        master_timeout: Optional[str] = None,
    ):
        self.name = name
        self.index_patterns = to_list(index_patterns)
        self.order = order
        self.version = version
        self.settings = settings
        self.mappings = mappings
        self.aliases = aliases
        self.create = create
        self.cause = cause
        self.master_timeout = master_timeout

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "index_patterns": self.index_patterns,
                "order": self.order,
                "version": self.version,
                "settings": self.settings,
                "mappings": self.mappings,
                "aliases": _aliases_to_dict(self.aliases),
            }
        )

    def __repr__(self) -> str:
        return f"PutIndexTemplateRequest(name={self.name!r})"


class GetIndexTemplatesRequest:
    def __init__(
        self,
        names: NAMES_TYPE = None,
        *,
        local: Optional[bool] = None,
        master_timeout: Optional[str] = None,
    ):
        self.names = to_list(names)
        self.local = local
        self.master_timeout = master_timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(names={self.names!r})"


class IndexTemplatesExistRequest(GetIndexTemplatesRequest):
    def __init__(
        self,
        names: Union[str, Collection[str]],
        *,
        local: Optional[bool] = None,
        master_timeout: Optional[str] = None,
    ):
        super().__init__(names, local=local, master_timeout=master_timeout)


class DeleteIndexTemplateRequest:
    def __init__(self, name: str, *, master_timeout: Optional[str] = None):
        self.name = name
        self.master_timeout = master_timeout

    def __repr__(self) -> str:
        return f"DeleteIndexTemplateRequest(name={self.name!r})"


class ValidateQueryRequest(IndicesRequest):
    def __init__(
        self,
        indices: NAMES_TYPE = None,
        *,
        query: Optional[Mapping[str, Any]] = None,
        explain: Optional[bool] = None,
        rewrite: Optional[bool] = None,
        all_shards: Optional[bool] = None,
        indices_options: Optional[IndicesOptions] = None,
    ):
        super().__init__(indices, indices_options)
        self.query = query
        self.explain = explain
        self.rewrite = rewrite
        self.all_shards = all_shards

    def to_dict(self) -> Optional[Dict[str, Any]]:
        if self.query is None:
            return None
        return {"query": self.query}


FILTER_TYPE = Union[str, Mapping[str, Any]]


class AnalyzeRequest:
    """
    Runs the analysis chain on some text and returns the produced tokens.

    Prefer the named constructors, which only accept
    valid combinations of analysis components:

    >>> AnalyzeRequest.with_global_analyzer("english", "Some text to analyze").to_dict()
    {'text': ['Some text to analyze'], 'analyzer': 'english'}
    >>> AnalyzeRequest.with_field("my-index", "title", "Quick fox").to_dict()
    {'text': ['Quick fox'], 'field': 'title'}
    """

    def __init__(
        self,
        text: Union[str, Sequence[str]],
        *,
        index: Optional[str] = None,
        analyzer: Optional[str] = None,
        tokenizer: Optional[FILTER_TYPE] = None,
        char_filter: Optional[Sequence[FILTER_TYPE]] = None,
        filter: Optional[Sequence[FILTER_TYPE]] = None,
        normalizer: Optional[str] = None,
        field: Optional[str] = None,
        explain: Optional[bool] = None,
        attributes: Optional[Sequence[str]] = None,
    ):
        self.text = to_list(text)
        self.index = index
        self.analyzer = analyzer
        self.tokenizer = tokenizer
        self.char_filter = list(char_filter) if char_filter else None
        self.filter = list(filter) if filter else None
        self.normalizer = normalizer
        self.field = field
        self.explain = explain
        self.attributes = list(attributes) if attributes else None

    @classmethod
    def with_global_analyzer(cls, analyzer: str, *text: str) -> "AnalyzeRequest":
        """Analyze text using a built-in analyzer"""
        return cls(list(text), analyzer=analyzer)

    @classmethod
    def with_index_analyzer(
        cls, index: str, analyzer: str, *text: str
    ) -> "AnalyzeRequest":
        """Analyze text using an analyzer defined in an index"""
        return cls(list(text), index=index, analyzer=analyzer)

    @classmethod
    def with_field(cls, index: str, field: str, *text: str) -> "AnalyzeRequest":
        """Analyze text using the analyzer of a mapped field"""
        return cls(list(text), index=index, field=field)

    @classmethod
    def with_normalizer(
        cls, index: str, normalizer: str, *text: str
    ) -> "AnalyzeRequest":
        """Analyze text using a normalizer defined in an index"""
        return cls(list(text), index=index, normalizer=normalizer)

    @classmethod
    def build_custom_analyzer(
        cls,
        tokenizer: FILTER_TYPE,
        *text: str,
        index: Optional[str] = None,
        char_filter: Optional[Sequence[FILTER_TYPE]] = None,
        filter: Optional[Sequence[FILTER_TYPE]] = None,
    ) -> "AnalyzeRequest":
        """Analyze text using an ad-hoc chain of tokenizer and filters"""
        return cls(
            list(text),
            index=index,
            tokenizer=tokenizer,
            char_filter=char_filter,
            filter=filter,
        )

    @classmethod
    def build_custom_normalizer(
        cls,
        *text: str,
        index: Optional[str] = None,
        char_filter: Optional[Sequence[FILTER_TYPE]] = None,
        filter: Optional[Sequence[FILTER_TYPE]] = None,
    ) -> "AnalyzeRequest":
        """Analyze text with an ad-hoc normalizer, i.e. filters without a tokenizer"""
        return cls(list(text), index=index, char_filter=char_filter, filter=filter)

    def to_dict(self) -> Dict[str, Any]:
        body = _drop_none(
            {
                "text": self.text,
                "analyzer": self.analyzer,
                "tokenizer": self.tokenizer,
                "char_filter": self.char_filter,
                "filter": self.filter,
                "normalizer": self.normalizer,
                "field": self.field,
            }
        )
        if self.explain:
            body["explain"] = True
            if self.attributes:
                body["attributes"] = self.attributes
        return body

    def __repr__(self) -> str:
        return f"AnalyzeRequest(index={self.index!r}, text={self.text!r})"
