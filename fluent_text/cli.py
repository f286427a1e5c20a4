import json
import logging
from pathlib import Path

import click
import jinja2

from . import casing, counting, data_format, extraction
from .config import TextConfig
from .errors import FluentTextError
from .segmenter import word_segmentize
from .templating import create_environment

logger = logging.getLogger(__name__)

CURRENT_DIR = Path(__file__).parent.resolve().absolute()

CASE_STYLES = {
    "pascal": casing.to_pascal_case,
    "camel": casing.to_camel_case,
    "kebab": casing.to_kebab_case,
    "snake": casing.to_snake_case,
    "screaming-snake": casing.to_screaming_snake_case,
    "title": casing.to_title_case,
    "sentence": casing.to_sentence_case,
    "upper": casing.to_upper_case,
    "lower": casing.to_lower_case,
    "alternating": casing.to_alternating_case,
    "leet": casing.to_leet_speak,
}

# format name -> (encode, decode); decoders that honour size limits take a config
CODECS = {
    "base64": (data_format.to_base64, data_format.from_base64),
    "hex": (data_format.to_hex, data_format.from_hex),
    "url": (data_format.to_url_encoded, data_format.from_url_encoded),
    "html": (data_format.to_html_encoded, data_format.from_html_encoded),
    "xml": (data_format.to_xml_content, data_format.from_xml_content),
    "json": (data_format.to_json_string, data_format.from_json_string),
    "csv": (data_format.to_csv_field, data_format.from_csv_field),
}

LIMITED_DECODERS = {"base64", "hex"}


def _read_text(text):
    """Return text, or standard input without its final newline when text is omitted."""
    if text is not None:
        return text
    return click.get_text_stream("stdin").read().removesuffix("\n")


def _parse_vars(values):
    context = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="--var")
        context[key] = value
    return context


@click.group()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON file with TextConfig options")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug information to stderr")
@click.pass_context
def fluent_text(ctx, config, verbose):
    """String casing, extraction and encoding helpers."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            text_config = TextConfig.from_dict(json.load(f))
        logger.debug("Loaded config from %s: %s", config, text_config.to_dict())
    else:
        text_config = TextConfig()

    ctx.obj = text_config


@fluent_text.command()
@click.argument("style", type=click.Choice(["name", *CASE_STYLES]))
@click.argument("text", required=False)
@click.pass_obj
def case(config, style, text):
    """Convert TEXT (or stdin) to the given casing STYLE."""
    text = _read_text(text)
    if style == "name":
        result = casing.to_name_case(text, config)
    else:
        result = CASE_STYLES[style](text)
    click.echo(result)


@fluent_text.command()
@click.argument("text", required=False)
def words(text):
    """Print the words of TEXT (or stdin) one per line, split as for PascalCase."""
    for word in word_segmentize(_read_text(text)):
        click.echo(word)


@fluent_text.command()
@click.argument("fmt", metavar="FORMAT", type=click.Choice(sorted(CODECS)))
@click.argument("text", required=False)
def encode(fmt, text):
    """Encode TEXT (or stdin) in FORMAT."""
    encoder, _ = CODECS[fmt]
    click.echo(encoder(_read_text(text)))


@fluent_text.command()
@click.argument("fmt", metavar="FORMAT", type=click.Choice(sorted(CODECS)))
@click.argument("text", required=False)
@click.pass_obj
def decode(config, fmt, text):
    """Decode TEXT (or stdin) from FORMAT."""
    _, decoder = CODECS[fmt]
    text = _read_text(text)
    try:
        result = decoder(text, config) if fmt in LIMITED_DECODERS else decoder(text)
    except FluentTextError as e:
        logger.debug("Decoding %s failed", fmt, exc_info=True)
        raise click.ClickException(str(e)) from e
    click.echo(result)


@fluent_text.command()
@click.option("--list-words", is_flag=True, default=False, help="Also list the distinct words")
@click.argument("text", required=False)
def stats(list_words, text):
    """Print letter, word, line and sentence counts for TEXT (or stdin)."""
    text = _read_text(text)
    counts = [
        ("characters", len(text)),
        ("letters", counting.count_letters(text)),
        ("digits", counting.count_digits(text)),
        ("uppercase", counting.count_uppercase(text)),
        ("lowercase", counting.count_lowercase(text)),
        ("vowels", counting.count_vowels(text)),
        ("consonants", counting.count_consonants(text)),
        ("words", counting.count_words(text)),
        ("lines", counting.count_lines(text)),
        ("sentences", counting.count_sentences(text)),
    ]
    env = create_environment(jinja2.FileSystemLoader(CURRENT_DIR / "templates"))
    template = env.get_template("stats.txt.jinja2")
    words = extraction.extract_all_words(text) if list_words else []
    click.echo(template.render(counts=counts, words=words), nl=False)


@fluent_text.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--var", "variables", multiple=True, help="Template variable as KEY=VALUE (repeatable)")
def render(template, variables):
    """Render a Jinja2 TEMPLATE file with the text filters available."""
    path = Path(template)
    env = create_environment(jinja2.FileSystemLoader(path.parent))
    context = _parse_vars(variables)
    logger.debug("Rendering %s with variables %s", path, sorted(context))
    click.echo(env.get_template(path.name).render(**context), nl=False)
