"""
Обработчики калькулятора CPL: /calc, /lead и ответы в пошаговом мастере
"""

import logging
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, filters
from telegram.constants import ParseMode
from utils.localization import get_text
from utils.error_handler import error_handler, ValidationError
from .cpl.calculator import CPLResult, LeadEconomics, evaluate, parse_one_shot_arguments
from .cpl.validators import format_number, format_percent
from .cpl.wizard import CPLWizard, ReplyKind, SessionStore, WizardReply

logger = logging.getLogger(__name__)

WIZARD_KEY = 'cpl_wizard'


def get_wizard(context: ContextTypes.DEFAULT_TYPE) -> CPLWizard:
    """Мастер, созданный при регистрации обработчиков"""
    return context.bot_data[WIZARD_KEY]


def format_result(context: ContextTypes.DEFAULT_TYPE, economics: LeadEconomics, result: CPLResult) -> str:
    """Текст с двумя CPL: безубыточность и под желаемый ROI"""
    return get_text(
        context,
        'calc_result',
        breakeven=format_number(result.breakeven),
        lead_price=format_number(result.lead_price),
        roi=format_percent(economics.roi)
    )


async def calc_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Быстрый режим: /calc <выплата> <аппрув%> <трэш%> [ROI%]"""
    chat_id = update.effective_chat.id

    try:
        economics = parse_one_shot_arguments(" ".join(context.args or []))
        result = evaluate(economics)
    except ValidationError as e:
        logger.info(f"/calc rejected for chat {chat_id}: {e.error_code}")
        await update.message.reply_text(error_handler.get_user_message(e, context))
        return

    logger.info(f"/calc for chat {chat_id}: {economics} -> {result}")
    await update.message.reply_text(
        format_result(context, economics, result),
        parse_mode=ParseMode.MARKDOWN
    )


async def lead_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Пошаговый режим: /lead начинает диалог заново"""
    reply = get_wizard(context).start_session(update.effective_chat.id)
    await send_wizard_reply(update, context, reply)


async def wizard_text_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
    """
    Передает текст в мастер, если у чата идет диалог

    Returns:
        True, если сообщение обработано мастером
    """
    reply = get_wizard(context).submit_value(update.effective_chat.id, update.message.text)
    if reply is None:
        return False

    await send_wizard_reply(update, context, reply)
    return True


async def send_wizard_reply(update: Update, context: ContextTypes.DEFAULT_TYPE, reply: WizardReply) -> None:
    """Превращает ответ мастера в сообщение пользователю"""
    if reply.kind is ReplyKind.PROMPT:
        await update.message.reply_text(
            get_text(context, f'wizard_prompt_{reply.step.value}'),
            parse_mode=ParseMode.MARKDOWN
        )
    elif reply.kind is ReplyKind.VALIDATION_ERROR:
        await update.message.reply_text(get_text(context, 'wizard_not_a_number'))
    elif reply.kind is ReplyKind.RESULT:
        await update.message.reply_text(
            get_text(context, 'wizard_done', result=format_result(context, reply.economics, reply.result)),
            parse_mode=ParseMode.MARKDOWN
        )
    else:
        # DEGENERATE и INVALID_STATE несут ошибку с готовым текстом
        await update.message.reply_text(error_handler.get_user_message(reply.error, context))


def register_cpl_handlers(application: Application, store: SessionStore) -> CPLWizard:
    """
    Регистрация команд калькулятора в приложении

    Args:
        application: Экземпляр приложения Telegram бота
        store: Хранилище сессий мастера
    """
    wizard = CPLWizard(store)
    application.bot_data[WIZARD_KEY] = wizard

    # Только новые сообщения: правка старой команды не запускает ее повторно
    application.add_handler(CommandHandler("calc", calc_command, filters=filters.UpdateType.MESSAGE))
    application.add_handler(CommandHandler("lead", lead_command, filters=filters.UpdateType.MESSAGE))

    logger.info("CPL calculator handlers registered successfully")
    return wizard
