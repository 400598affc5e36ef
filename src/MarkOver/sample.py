from __future__ import annotations

SAMPLE_CONTENT = """\
# Welcome to MarkOver

MarkOver combines the simplicity of Markdown with the flexibility of HTML class-based styling.

## Key Features

- **Simple syntax** like Markdown
- **Powerful layouts** with Angle Blocks
- **Nested layouts** for complex designs
- **Pagination** for print-ready documents

## Angle Blocks

Angle Blocks use the syntax `<>'classes'...content...</>` to apply classes to content:

<>'flex items-center justify-between gap-4 p-4 bg-blue-50 rounded-lg'
# Document Title
![Sample Image](https://dummyimage.com/200x120/3b82f6/ffffff.png&text=Logo)
</>

## Grid Layouts

<>'grid grid-cols-2 gap-6 p-4 bg-gray-50 rounded-lg'
<>'flex flex-col'
### Left Column
This is the left column content. You can put any Markdown content here including:

- Lists
- **Bold text**
- *Italic text*
- [Links](https://example.com)
</>
<>'flex flex-col'

### Right Column
This is the right column content.

`inline code` and regular text.
</>
</>

## Code Examples

```python
def parse(content):
    # Angle blocks inside code are left alone
    return "<>'p-4' not a block </>"
```

## Lists and Formatting

1. First item with **bold text**
2. Second item with *italic text*
3. Third item with ~~strikethrough~~

- [x] Task done
- [ ] Task pending

> This is a blockquote example.

| Feature | Markdown | MarkOver |
|---------|----------|----------|
| Headers | yes | yes |
| Layouts | no | yes |

## Nested Layouts

<>'grid grid-cols-2 gap-6 p-6 bg-gray-100 rounded-xl'
### Left Side
This is the left column with nested content.

<>'bg-blue-100 p-4 rounded-lg border border-blue-300'
#### Nested Card
This is a nested Angle Block inside the left column.
</>

### Right Side
<>'bg-white/20 p-4 rounded-lg'
### Card B
<>'bg-white/30 p-2 rounded mt-2'
#### Sub-card
Even deeper nesting!
</>
</>
</>

## Conclusion

The web view shows the document as one continuous page; the paged view splits it into printable pages.
"""
