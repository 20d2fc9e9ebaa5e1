"""Sample documents and record builders shared by test modules."""

from __future__ import annotations

from mokareads.domain.content import Article, ArticleMetadata, Cheatsheet, CheatsheetMetadata

RUST_SHEET = """\
---
title: Intro
author: Mustafif
level: 1
lang: rust
icon: rust.svg
---
# Ownership

Every value has one owner.
"""

CPP_SHEET = """\
---
title: Pointers
author: Ada
level: 3
lang: c++
icon: cplusplus.svg
---
Raw pointers and references.
"""

ZIG_SHEET = """\
---
title: Comptime
author: Loris
level: 9
lang: zig
icon: zig.svg
---
Unknown level codes read as beginner.
"""

INTRO_ARTICLE = """\
---
title: Intro
description: Getting started with Rust
author: Mustafif
icon: rust.svg
date: 2024-01-05
tags: rust, systems
---
Rust is a systems language.
"""

KOTLIN_ARTICLE = """\
---
title: Coroutines in Practice
description: Structured concurrency on the JVM
author: Grace
icon: kotlin.svg
date: 2024-02-10
tags: [kotlin, async]
---
Launch, await, cancel.
"""


def make_article(title: str, tags: str = "", **meta: str) -> Article:
    fields = {"description": "", "author": "", "icon": "", **meta}
    return Article.new(ArticleMetadata(title=title, tags=tags, **fields), f"# {title}\n")


def make_sheet(title: str, lang: str, level: int = 1, **meta: str) -> Cheatsheet:
    fields = {"author": "", "icon": "", **meta}
    return Cheatsheet.new(
        CheatsheetMetadata(title=title, lang=lang, level=level, **fields), f"# {title}\n"
    )
