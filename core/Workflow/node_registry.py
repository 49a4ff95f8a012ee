import structlog
from typing import Any, Dict, List, Optional, Type
import pkgutil
import importlib
import inspect
from Node.Core.Node.Core.BaseNode import BaseNode, BlockingNode
from Node.Core.Node.Core.Data import NodeConfig

logger = structlog.get_logger(__name__)


class NodeRegistry:
    """
    Registry class responsible for discovering and creating node instances.
    """

    _node_registry: Optional[Dict[str, Type[BaseNode]]] = None
    _abstract_base_classes = {BaseNode, BlockingNode}

    @classmethod
    def _discover_node_classes(cls) -> Dict[str, Type[BaseNode]]:
        import Node.Nodes as Nodes
        discovered_classes = []

        def walk_packages(path, prefix):
            for importer, modname, ispkg in pkgutil.iter_modules(path, prefix):
                if ispkg:
                    try:
                        subpackage = importlib.import_module(modname)
                        if hasattr(subpackage, "__path__"):
                            walk_packages(subpackage.__path__, modname + ".")
                    except Exception as e:
                        logger.error(f"Failed to import subpackage '{modname}'", error=str(e))
                        continue
                else:
                    try:
                        module = importlib.import_module(modname)
                        for name, obj in inspect.getmembers(module, inspect.isclass):
                            if obj.__module__ != modname:
                                continue
                            if issubclass(obj, BaseNode) and not inspect.isabstract(obj):
                                if obj not in cls._abstract_base_classes:
                                    discovered_classes.append(obj)
                    except Exception as e:
                        logger.error(f"Failed to import module '{modname}'", error=str(e))
                        continue

        walk_packages(Nodes.__path__, Nodes.__name__ + ".")

        mapping = {}
        for node_class in discovered_classes:
            identifier = node_class.identifier()
            if identifier in mapping and mapping[identifier] is not node_class:
                logger.warning(
                    "Duplicate node identifier, keeping first",
                    identifier=identifier,
                    kept=mapping[identifier].__name__,
                    skipped=node_class.__name__,
                )
                continue
            mapping[identifier] = node_class

        logger.info(f"Auto-discovered {len(mapping)} node Types in Nodes Package")
        return mapping

    @classmethod
    def _ensure_registry_loaded(cls) -> None:
        if cls._node_registry is None:
            cls._node_registry = cls._discover_node_classes()

    @classmethod
    def reset(cls) -> None:
        """Forget discovered classes so the next lookup rescans the Nodes package."""
        cls._node_registry = None

    @classmethod
    def list_node_types(cls) -> List[str]:
        cls._ensure_registry_loaded()
        return sorted(cls._node_registry)

    @classmethod
    def get_node_class(cls, node_type: str) -> Type[BaseNode]:
        cls._ensure_registry_loaded()
        node_cls = cls._node_registry.get(node_type)
        if node_cls is None:
            raise ValueError(
                f"Unknown node type '{node_type}'. "
                f"Available types: {sorted(cls._node_registry)}"
            )
        return node_cls

    @classmethod
    def create_node(cls, nodeConfig: NodeConfig) -> BaseNode:
        cls._ensure_registry_loaded()
        node_cls = cls._node_registry.get(nodeConfig.type)
        if node_cls:
            instance = node_cls(nodeConfig)
            logger.info(f"Initialized BaseNode Instance", node_type=nodeConfig.type, node_id=nodeConfig.id)
            return instance

        available_types = sorted(cls._node_registry)
        raise ValueError(
            f"Unknown node type '{nodeConfig.type}' for node id '{nodeConfig.id}'. "
            f"Available types: {available_types}"
        )

    @classmethod
    def create_default(cls, node_type: str) -> BaseNode:
        """
        Create a node of the given type with its default configuration.
        Node classes without a create() factory get an empty config.
        """
        node_cls = cls.get_node_class(node_type)
        factory = getattr(node_cls, "create", None)
        config = factory() if callable(factory) else NodeConfig(type=node_type)
        return cls.create_node(config)

    @classmethod
    def get_ui_data(cls) -> List[Dict[str, Any]]:
        """
        Palette entries for every registered node type.
        """
        cls._ensure_registry_loaded()
        entries = []
        for node_type in sorted(cls._node_registry):
            node_cls = cls._node_registry[node_type]
            ui_data = node_cls.get_ui_data()
            entries.append({"type": node_type, "title": ui_data.contextMenuTitle or node_type, **ui_data.model_dump()})
        return entries
