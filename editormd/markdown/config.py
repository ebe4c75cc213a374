def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    ``tex_math_dollars`` and ``raw_tex`` are switched off so that Pandoc leaves
    ``$...$`` and ``$$...$$`` in the HTML as plain text. The KaTeX
    postprocessor picks them up from there.
    """
    return {
        "format": (
            "markdown"
            "+autolink_bare_uris+strikeout+superscript+subscript+task_lists"
            "+pipe_tables+footnotes+fenced_code_blocks+fenced_code_attributes"
            "+raw_html+hard_line_breaks"
            "-tex_math_dollars-tex_math_single_backslash-raw_tex"
        ),
        "extra_args": [],
    }
