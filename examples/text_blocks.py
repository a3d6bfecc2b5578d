from blockshift import BlockFactory, BlockKindRegistry, configure_logging, render_block


configure_logging("DEBUG")

registry = BlockKindRegistry()
factory = BlockFactory(registry)


registry.register(
    "core/paragraph",
    default_attributes={"content": ""},
    save=lambda attrs: f"<p>{attrs['content']}</p>",
    transforms={
        "to": [{
            "blocks": ["core/list"],
            "transform": lambda block: factory.create_block("core/list", {
                "values": [line for line in block.attributes["content"].split("\n") if line],
            }),
        }],
    },
)

registry.register(
    "core/heading",
    default_attributes={"content": "", "level": 2},
    save=lambda attrs: f"<h{attrs['level']}>{attrs['content']}</h{attrs['level']}>",
    transforms={
        "from": [{
            "blocks": ["core/paragraph"],
            # the first line becomes the heading, the rest stays a paragraph
            "transform": lambda block: [
                factory.create_block("core/heading", {"content": block.attributes["content"].split("\n")[0]}),
                *[
                    factory.create_block("core/paragraph", {"content": rest})
                    for rest in block.attributes["content"].split("\n", 1)[1:]
                ],
            ],
        }],
    },
)

registry.register(
    "core/list",
    default_attributes={"values": []},
    save=lambda attrs: "<ul>" + "".join(f"<li>{value}</li>" for value in attrs["values"]) + "</ul>",
)


if __name__ == "__main__":
    paragraph = factory.create_block("core/paragraph", {"content": "Ribs\nsmoked for six hours"})
    print("switch options:", [kind.name for kind in factory.get_possible_transformations(paragraph)])

    for target in ["core/heading", "core/list", "core/quote"]:
        blocks = factory.switch_to_block_type(paragraph, target)
        if blocks is None:
            print(f"{target}: cannot switch")
            continue
        print(f"{target}:", "".join(render_block(registry, block) for block in blocks))
