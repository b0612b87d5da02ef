"""
appx 清单 / MSBuild 项目文件的 XML 读写与限定名解析。

清单模板里的元素名带有命名空间前缀（`m2:VisualElements`、`uap:Capability`），
这里统一把 `prefix:Local` 形式的名字解析到文档实际声明的命名空间，
使各个修改函数可以按方言前缀查找/创建节点，且写回时保留原有前缀。
"""

from __future__ import annotations

from lxml import etree

# 模板未声明某前缀时使用的已知命名空间。
KNOWN_NAMESPACES = {
    "m2": "http://schemas.microsoft.com/appx/2013/manifest",
    "m3": "http://schemas.microsoft.com/appx/2014/manifest",
    "mp": "http://schemas.microsoft.com/appx/2014/phone/manifest",
    "uap": "http://schemas.microsoft.com/appx/manifest/uap/windows10",
}


def load_xml(path: str) -> etree._ElementTree:
    """读取 XML 文件；跳过首个 `<` 之前的内容（如 BOM）后解析。"""
    with open(path, encoding="utf-8") as f:
        contents = f.read()
    start = contents.find("<")
    if start > 0:
        contents = contents[start:]
    parser = etree.XMLParser(remove_blank_text=True)
    root = etree.fromstring(contents.encode("utf-8"), parser)
    return root.getroottree()


def save_xml(path: str, tree: etree._ElementTree, *, indent: int = 4) -> None:
    """按固定缩进重新排版并以 UTF-8（带 XML 声明）写回磁盘。"""
    etree.indent(tree, space=" " * indent)
    tree.write(path, encoding="utf-8", xml_declaration=True, pretty_print=True)


def _document_root(el: etree._Element) -> etree._Element:
    return el.getroottree().getroot()


def namespace_for(el: etree._Element, prefix: str) -> str | None:
    """返回前缀对应的命名空间 URI；空前缀表示文档默认命名空间。"""
    nsmap = _document_root(el).nsmap
    if not prefix:
        return nsmap.get(None)
    uri = nsmap.get(prefix) or KNOWN_NAMESPACES.get(prefix)
    if not uri:
        raise ValueError(f"unknown namespace prefix: {prefix}")
    return uri


def qualify(el: etree._Element, name: str) -> str:
    """把 `prefix:Local` 解析为 lxml 的 `{uri}Local` 形式。"""
    prefix, _sep, local = name.rpartition(":")
    uri = namespace_for(el, prefix)
    return f"{{{uri}}}{local}" if uri else local


def local_name(el: etree._Element) -> str:
    """去掉命名空间后的标签名。"""
    return etree.QName(el).localname


def prefixed_name(el: etree._Element) -> str:
    """按文档中的写法返回标签名（`uap:Capability` 或 `Capability`）。"""
    local = local_name(el)
    return f"{el.prefix}:{local}" if el.prefix else local


def is_element(node: object) -> bool:
    """排除注释、处理指令等非元素节点。"""
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def find(root: etree._Element, name: str) -> etree._Element | None:
    """查找首个匹配限定名的后代节点（相当于 `.//name`）。"""
    return next(root.iterdescendants(qualify(root, name)), None)


def find_child(parent: etree._Element, name: str) -> etree._Element | None:
    """只在直接子节点中查找。"""
    return parent.find(qualify(parent, name))


def ensure_namespace(el: etree._Element, prefix: str) -> None:
    """确保文档根节点声明了该前缀，避免 lxml 生成 `ns0:` 之类的前缀。"""
    if not prefix:
        return
    root = _document_root(el)
    if prefix in root.nsmap:
        return
    uri = namespace_for(root, prefix)
    keep = [p for p in root.nsmap if p] + [prefix]
    etree.cleanup_namespaces(root, top_nsmap={prefix: uri}, keep_ns_prefixes=keep)


def sub_element(parent: etree._Element, name: str, attrib: dict[str, str] | None = None) -> etree._Element:
    """在父节点下追加 `prefix:Local` 子节点，必要时先声明前缀。"""
    prefix = name.rpartition(":")[0]
    ensure_namespace(parent, prefix)
    el = etree.SubElement(parent, qualify(parent, name))
    for key, value in (attrib or {}).items():
        el.set(key, value)
    return el


def rename(el: etree._Element, name: str) -> None:
    """就地修改节点标签（保留属性与子节点）。"""
    prefix = name.rpartition(":")[0]
    ensure_namespace(el, prefix)
    el.tag = qualify(el, name)
